"""Video assembler worker: merge uploaded chunks and convert them to MPEG-DASH."""
