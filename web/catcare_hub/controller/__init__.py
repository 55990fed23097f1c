"""Controller package - Route handlers"""
from .site_controller import SiteController

__all__ = ['SiteController']
