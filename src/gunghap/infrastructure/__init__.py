"""Infrastructure layer — concrete Hangul decomposition."""
