"""
mathutil — скалярные математические примитивы

Периодическая арифметика углов, saturating-конверсия числовых типов,
битовые утилиты степеней двойки и кодек half-precision float.
"""

# Numeric types
from src.mathutil.numeric_types import (
    ALL_TYPES,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    LONG_DOUBLE,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT64_MAX,
    NumericKind,
    NumericType,
    get_numeric_type,
)

# Saturating conversion
from src.mathutil.saturation import (
    DisallowedNumericTypeError,
    is_allowed_pair,
    limit,
    make_limiter,
)

# Scalar helpers
from src.mathutil.scalar import (
    EQN_EPS,
    abs_max,
    acos,
    approach,
    asin,
    atan2,
    ceil_to_int,
    clamp,
    cos,
    deg_to_rad,
    floor_to_int,
    get_number_of_decimals,
    get_number_of_times_dividable_by_x,
    is_zero,
    lerp,
    pow2,
    pow3,
    pow4,
    rad_to_deg,
    round_to_int,
    round_to_places,
    sign,
    sin,
    smooth_step,
    smoother_step,
    sqrt,
    tan,
    vmax,
    vmin,
)

# Periodic arithmetic
from src.mathutil.angles import (
    DEFAULT_ANGLE_BASE,
    FULL_TURN_DEG,
    HALF_TURN_DEG,
    angle_difference,
    approach_angle,
    clamp_angle,
    is_angle_in_range,
    lerp_angle,
    normalize_angle,
)

# Bits / powers of two
from src.mathutil.bits import (
    get_aligned_offset,
    get_greatest_common_divisor,
    get_highest_bit,
    get_least_common_multiple,
    get_power_of_2_values,
    next_power_of_2,
    previous_power_of_2,
    snap_to_grid,
)

# Half-float codec
from src.mathutil.float16 import (
    FLOAT16_MAX,
    Float16,
    float16_to_float32,
    float32_bits,
    float32_from_bits,
    float32_to_float16,
)

# Flags
from src.mathutil.flags import (
    FlagSet,
    add_flag,
    is_flag_set,
    remove_flag,
    set_flag,
)

# Random source
from src.mathutil.random_source import (
    RandomConfig,
    configure_random,
    get_default_random_generator,
    random_float,
    random_int,
    seed_default_generator,
)

__all__ = [
    # Numeric types
    "ALL_TYPES",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "LONG_DOUBLE",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT64_MAX",
    "NumericKind",
    "NumericType",
    "get_numeric_type",
    # Saturating conversion
    "DisallowedNumericTypeError",
    "is_allowed_pair",
    "limit",
    "make_limiter",
    # Scalar helpers
    "EQN_EPS",
    "abs_max",
    "acos",
    "approach",
    "asin",
    "atan2",
    "ceil_to_int",
    "clamp",
    "cos",
    "deg_to_rad",
    "floor_to_int",
    "get_number_of_decimals",
    "get_number_of_times_dividable_by_x",
    "is_zero",
    "lerp",
    "pow2",
    "pow3",
    "pow4",
    "rad_to_deg",
    "round_to_int",
    "round_to_places",
    "sign",
    "sin",
    "smooth_step",
    "smoother_step",
    "sqrt",
    "tan",
    "vmax",
    "vmin",
    # Periodic arithmetic
    "DEFAULT_ANGLE_BASE",
    "FULL_TURN_DEG",
    "HALF_TURN_DEG",
    "angle_difference",
    "approach_angle",
    "clamp_angle",
    "is_angle_in_range",
    "lerp_angle",
    "normalize_angle",
    # Bits / powers of two
    "get_aligned_offset",
    "get_greatest_common_divisor",
    "get_highest_bit",
    "get_least_common_multiple",
    "get_power_of_2_values",
    "next_power_of_2",
    "previous_power_of_2",
    "snap_to_grid",
    # Half-float codec
    "FLOAT16_MAX",
    "Float16",
    "float16_to_float32",
    "float32_bits",
    "float32_from_bits",
    "float32_to_float16",
    # Flags
    "FlagSet",
    "add_flag",
    "is_flag_set",
    "remove_flag",
    "set_flag",
    # Random source
    "RandomConfig",
    "configure_random",
    "get_default_random_generator",
    "random_float",
    "random_int",
    "seed_default_generator",
]
