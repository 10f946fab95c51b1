"""PDF-417 high-level codeword encoding and symbol dimensions."""