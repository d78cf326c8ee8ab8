"""sitecheck - pre-deploy structural and browser checks for a static landing page."""

__version__ = "0.1.0"

from sitecheck.application.behavioral.prober import BehavioralProber
from sitecheck.application.structural.validator import StructuralValidator

__all__ = ["BehavioralProber", "StructuralValidator", "__version__"]
