"""SkillSwap skill matching and trade core."""

__version__ = "0.1.0"
