"""SnackBooks: bookkeeping for a home snack-food business."""

__version__ = "1.0.0"
