"""Domain models for the farbfeld package.

- Core pixel model (Pixel)
- The pixel buffer holding a whole image (FarbfeldImage)
- Codec configuration (CodecParams)

All models are built using Pydantic, so dimensions and configuration are
validated on construction.
"""

# Re-export core models
from farbfeld.models.core_models import CHANNEL_MAX, CHANNEL_MIN, Pixel

# Re-export image models
from farbfeld.models.image_models import FarbfeldImage, clamp_index

# Re-export setting models
from farbfeld.models.settings_models import CodecParams
