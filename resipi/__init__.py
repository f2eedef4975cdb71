"""AI Resipi Melayu: Malay recipes from the ingredients you have."""
