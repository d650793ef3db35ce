"""job-corpus: job-posting extraction and corpus reprocessing toolkit."""

__version__ = "0.1.0"
