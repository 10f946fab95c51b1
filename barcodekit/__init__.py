"""Barcode building blocks: 2-of-5 barcodes, QR and PDF-417 data encoding, scaling."""

__version__ = "0.1.0"