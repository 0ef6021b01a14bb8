# RFC 4648 Base32 alphabet
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_INDEX    = {char: index for index, char in enumerate(BASE32_ALPHABET)}

# Profile shared with authenticator apps (Google Authenticator and friends)
ALGORITHM       = "SHA1"
DEFAULT_STEP    = 30
DEFAULT_DIGITS  = 6
MAX_DIGITS      = 10

DEFAULT_SECRET_LENGTH = 20
