"""Command helper core for Minecraft Bedrock Edition: ids, parse trees, suggestions, structure hints and colouring."""

__version__ = "0.2.29"