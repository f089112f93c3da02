SEPARATOR_LINE_LENGTH = 60

MANIFEST_FILE = "manifest.json"
SPRITE_FILE_PREFIX = "Sprite"
DUMMY_SUFFIX = ".dummy"
BOUNDS_SUFFIX = "_bounds"
