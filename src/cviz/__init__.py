"""cviz: browsable gallery reports for classification results."""

__version__ = "0.0.1"
