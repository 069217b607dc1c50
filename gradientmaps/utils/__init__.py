from .num_utils import round_half_up, clamp_position, is_plain_number, leading_number

__all__ = [
    "round_half_up",
    "clamp_position",
    "is_plain_number",
    "leading_number",
]
