"""Physical constants shared by the flight parameter pipeline."""
from __future__ import annotations

import math

# Classical 35mm film diagonal (mm)
DIAG_35MM = math.sqrt(36**2 + 24**2)

MIN_PHOTO_INTERVAL = 2.0  # seconds between captures the camera can sustain
INTERVAL_RESOLUTION = 0.1  # seconds; integer seconds block useful drone speeds
INTERVAL_TOLERANCE = 1e-4

# Maximum tolerable motion blur in pixels.
# FIGUEIREDO, E. O. et al. Planos de Voo Semiautonomos para Fotogrametria
# com Aeronaves Remotamente Pilotadas de Classe 3
MAX_PIXEL_ROLL = 1.2

KMH_PER_MS = 3.6
