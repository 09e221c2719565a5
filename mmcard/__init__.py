"""Digital business card service: public card page, QR code and vCard export."""

__version__ = "0.1.0"
