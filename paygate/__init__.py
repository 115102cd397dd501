"""Razorpay payment facade: order creation and payment signature verification."""

__version__ = "0.1.0"
