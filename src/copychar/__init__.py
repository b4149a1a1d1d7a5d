"""copychar: copy hard-to-type Unicode characters to the clipboard."""

__version__ = "0.1.0"
