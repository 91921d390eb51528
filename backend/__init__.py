"""FunLabs learning API backend."""
