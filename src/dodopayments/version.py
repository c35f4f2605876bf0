__title__ = "dodopayments"
__version__ = "0.1.0"
