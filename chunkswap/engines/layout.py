# chunkswap/engines/layout.py
# Region file layout (big-endian):
#   0x0000 - 0x0FFF  locations   1024 x (3-byte sector offset + 1-byte sector count)
#   0x1000 - 0x1FFF  timestamps  1024 x 4 opaque bytes
#   0x2000 -         chunk payload sectors

SECTOR_SIZE = 4096

REGION_WIDTH = 32
SLOT_COUNT = REGION_WIDTH * REGION_WIDTH

BLOCKS_PER_CHUNK = 16

ENTRY_SIZE = 4
LOCATION_TABLE_OFFSET = 0
TIMESTAMP_TABLE_OFFSET = SECTOR_SIZE

HEADER_SECTORS = 2
HEADER_SIZE = HEADER_SECTORS * SECTOR_SIZE

MAX_SECTOR_COUNT = 0xFF
