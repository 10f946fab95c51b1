"""QR code data encoding, version tables and the module grid with mask penalties."""