from .config import (
    DEFAULT_DURATION, DEFAULT_EASING, DEFAULT_FPS, OPTIONS_FILE,
    load_options, save_options,
)
from .easing import EASING_FUNCTIONS, get_easing, linear
from .ticker import Ticker, PygameTicker, default_ticker
from .color import parse_color, format_color, blend_colors, is_color_string, has_alpha
from .transition import (
    Transition, Segment,
    scalar_tween, value_tween, attributes_tween,
    values_equal, attributes_equal, freeze_attributes,
)
from .coordinator import AttributeCoordinator
from .sprite import SpriteTarget

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_DURATION', 'DEFAULT_EASING', 'DEFAULT_FPS', 'OPTIONS_FILE',
    'load_options', 'save_options',
    'EASING_FUNCTIONS', 'get_easing', 'linear',
    'Ticker', 'PygameTicker', 'default_ticker',
    'parse_color', 'format_color', 'blend_colors', 'is_color_string', 'has_alpha',
    'Transition', 'Segment',
    'scalar_tween', 'value_tween', 'attributes_tween',
    'values_equal', 'attributes_equal', 'freeze_attributes',
    'AttributeCoordinator', 'SpriteTarget',
]
