"""Sample bid-package generators."""
