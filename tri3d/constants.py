"""Library-wide constants: revision, colour spaces, face culling and texture formats."""

from enum import Enum, IntEnum

REVISION = "171"
WASM_VERSION = 49


class ColorSpace(str, Enum):
    """Colour space identifiers, following CSS Color Module Level 4 and WebGPU names."""

    NONE = ""
    SRGB = "srgb"
    LINEAR_SRGB = "srgb-linear"

    LINEAR_TRANSFER = "linear"
    SRGB_TRANSFER = "srgb"


class CullFace(IntEnum):
    """Which polygon faces are culled."""

    NONE = 0
    BACK = 1
    FRONT = 2
    BACK_BACK = 3


class Format(IntEnum):
    """Texture data types and pixel formats."""

    # WebGL 1
    UNSIGNED_BYTE_TYPE = 1009
    BYTE_TYPE = 1010
    SHORT_TYPE = 1011
    UNSIGNED_SHORT_TYPE = 1012
    INT_TYPE = 1013
    UNSIGNED_INT_TYPE = 1014
    FLOAT_TYPE = 1015
    HALF_FLOAT_TYPE = 1016
    UNSIGNED_SHORT_4444_TYPE = 1017
    UNSIGNED_SHORT_5551_TYPE = 1018
    UNSIGNED_INT_248_TYPE = 1020
    UNSIGNED_INT_5999_TYPE = 35902
    ALPHA_FORMAT = 1021
    RGB_FORMAT = 1022
    RGBA_FORMAT = 1023
    LUMINANCE_FORMAT = 1024
    LUMINANCE_ALPHA_FORMAT = 1025
    DEPTH_FORMAT = 1026
    DEPTH_STENCIL_FORMAT = 1027

    # WebGL 2
    RED_FORMAT = 1028
    RED_INTEGER_FORMAT = 1029
    RG_FORMAT = 1030
    RG_INTEGER_FORMAT = 1031
    RGB_INTEGER_FORMAT = 1032
    RGBA_INTEGER_FORMAT = 1033

    # PVRTC
    RGB_PVRTC_4BPPV1_FORMAT = 35840
    RGB_PVRTC_2BPPV1_FORMAT = 35841
    RGBA_PVRTC_4BPPV1_FORMAT = 35842
    RGBA_PVRTC_2BPPV1_FORMAT = 35843

    # S3TC
    RGB_S3TC_DXT1_FORMAT = 33776
    RGBA_S3TC_DXT1_FORMAT = 33777
    RGBA_S3TC_DXT3_FORMAT = 33778
    RGBA_S3TC_DXT5_FORMAT = 33779

    # ETC
    RGB_ETC1_FORMAT = 36196
    RGB_ETC2_FORMAT = 37492
    RGBA_ETC2_EAC_FORMAT = 37496

    # ASTC
    RGBA_ASTC_4X4_FORMAT = 37808
    RGBA_ASTC_5X4_FORMAT = 37809
    RGBA_ASTC_5X5_FORMAT = 37810
    RGBA_ASTC_6X5_FORMAT = 37811
    RGBA_ASTC_6X6_FORMAT = 37812
    RGBA_ASTC_8X5_FORMAT = 37813
    RGBA_ASTC_8X6_FORMAT = 37814
    RGBA_ASTC_8X8_FORMAT = 37815
    RGBA_ASTC_10X5_FORMAT = 37816
    RGBA_ASTC_10X6_FORMAT = 37817
    RGBA_ASTC_10X8_FORMAT = 37818
    RGBA_ASTC_10X10_FORMAT = 37819
    RGBA_ASTC_12X10_FORMAT = 37820
    RGBA_ASTC_12X12_FORMAT = 37821

    # BPTC
    RGBA_BPTC_FORMAT = 36492
    RGB_BPTC_SIGNED_FORMAT = 36494
    RGB_BPTC_UNSIGNED_FORMAT = 36495

    # RGTC
    RED_RGTC1_FORMAT = 36283
    SIGNED_RED_RGTC1_FORMAT = 36284
    RED_GREEN_RGTC2_FORMAT = 36285
    SIGNED_RED_GREEN_RGTC2_FORMAT = 36286