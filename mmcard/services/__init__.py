"""
Use cases for the card service.

Pure presentation/export rules (normalization, link classification, themes,
card layout, canonical URL, QR and vCard encoding) plus the profile lookup
that routers call instead of touching a repository directly.
"""
