"""
UNI2 Skin Tool
Exports and imports custom color palettes in UNDER NIGHT IN-BIRTH II Sys:Celes saves
"""

__version__ = "0.0.1"
