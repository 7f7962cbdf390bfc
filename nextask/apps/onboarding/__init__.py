"""
Onboarding App Module

Provides the first-run slide sequence for NexTask.
"""

from .flow import OnboardingFlow, Slide, DEFAULT_SLIDES, slides_from_config
from .routes import onboarding_bp, init_routes

__all__ = ['OnboardingFlow', 'Slide', 'DEFAULT_SLIDES', 'slides_from_config', 'onboarding_bp', 'init_routes']
