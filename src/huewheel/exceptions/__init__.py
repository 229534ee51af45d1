"""
Custom exception hierarchy for huewheel.

The color math itself never raises: angles wrap, positions and levels clamp,
and out-of-bounds range settings fall back to defaults. Exceptions exist for
the layers around it.

## Exception Hierarchy

```
HueWheelError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── SyncCycleError
```

### Example: Config Validation Error

```python
from huewheel.exceptions import ConfigValidationError

raise ConfigValidationError(
    field="bar.length",
    value="long",
    error_msg="Input should be a valid integer",
    file_path="/path/to/config.json",
)
```
"""

from .base import HueWheelError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .sync import SyncCycleError

__all__ = [
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    # Base
    "HueWheelError",
    # Sync
    "SyncCycleError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
