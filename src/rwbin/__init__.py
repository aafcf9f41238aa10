"""rwbin: write numeric literals as raw binary files and read them back."""

__version__ = "0.1.0"
