"""
Minecraft Add-on Scaffold

Interactive wizard that initializes or reconfigures a Minecraft Bedrock
add-on (behavior/resource pack) project.
"""

__version__ = "0.1.0"

from addon_scaffold.core.version_classifier import classify_versions
from addon_scaffold.cli.commands import main

__all__ = [
    "classify_versions",
    "main",
]
