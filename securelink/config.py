"""
Configuration constants for the SecureLink application.
"""

import string

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "SecureLink URL Encryptor"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_PROG = "securelink"  # Use: Program name shown in command line usage and help. Type: str. Range: Any valid string.
APP_DESCRIPTION = "Wrap URLs into password-protected tokens and open them again."  # Use: One-line description shown in command line help. Type: str. Range: Any valid string.

# Security Settings
SALT_SIZE = 16  # Use: Size of the key-derivation salt in bytes, generated fresh per token. Type: int. Range: 16 bytes; changing it breaks compatibility with issued tokens.
IV_SIZE = 16  # Use: Size of the AES-CBC initialization vector in bytes. Type: int. Range: 16 bytes (the AES block size).
KEY_SIZE = 32  # Use: Size of the derived encryption key in bytes. Corresponds to AES-256. Type: int. Range: 32 bytes; changing it breaks compatibility with issued tokens.
PBKDF2_ITERATIONS = 10000  # Use: Number of PBKDF2-HMAC iterations used to derive the token key. Type: int. Range: 10000; changing it breaks compatibility with issued tokens.
PBKDF2_HASH = "sha256"  # Use: Default PRF hash for PBKDF2. Type: str. Range: One of the keys of PBKDF2_HASHES.
PBKDF2_HASHES = ("sha256", "sha1")  # Use: PRF hashes accepted for PBKDF2; "sha1" opens tokens from issuers whose PBKDF2 defaulted to HMAC-SHA1. Type: tuple[str]. Range: Names understood by CryptoManager.

# Token Settings
TOKEN_FIELDS = ("salt", "iv", "encrypted")  # Use: Field names of the serialized envelope, in serialization order. Type: tuple[str]. Range: Fixed by the token wire format.
SHARE_LINK_PARAM = "data"  # Use: Query parameter that carries the token in a share link. Type: str. Range: Any valid query parameter name.
DEFAULT_BASE_URL = "https://securelink.app/"  # Use: Base address that share links point to. Type: str. Range: Any absolute http(s) URL.

# URL Settings
URL_SCHEMES = ("http", "https")  # Use: Schemes accepted by the URL validator. Type: tuple[str]. Range: Lower-case scheme names.
URL_DEFAULT_PREFIX = "https://"  # Use: Prefix added to URLs entered without an explicit scheme. Type: str. Range: "http://" or "https://".
URL_FORBIDDEN_HOST_CHARS = " \t\n\r#%/:<>?@[\\]^|\"'`{}"  # Use: Characters that may not appear in a host name. Type: str. Range: Any string of characters.

# Password Strength Settings
PASSWORD_STRENGTH_MIN_LENGTH = 8  # Use: Length at which the length criterion of the strength meter is met. Type: int. Range: Positive integer.
PASSWORD_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>?"  # Use: Characters that satisfy the special-character criterion. Type: str. Range: Any string of punctuation characters.
STRENGTH_NONE = "none"  # Use: Strength level of an empty password. Type: str. Range: Any string.
STRENGTH_WEAK = "weak"  # Use: Strength level for two or fewer satisfied criteria. Type: str. Range: Any string.
STRENGTH_FAIR = "fair"  # Use: Strength level for three satisfied criteria. Type: str. Range: Any string.
STRENGTH_GOOD = "good"  # Use: Strength level for four satisfied criteria. Type: str. Range: Any string.
STRENGTH_STRONG = "strong"  # Use: Strength level when every criterion is satisfied. Type: str. Range: Any string.

# Password Generator Settings
PASSWORD_GENERATOR_DEFAULT_LENGTH = 16  # Use: Default length for generated passwords. Type: int. Range: PASSWORD_GENERATOR_MIN_LENGTH or more.
PASSWORD_GENERATOR_MIN_LENGTH = 4  # Use: Smallest length that still fits one character of each class. Type: int. Range: 4.
PASSWORD_GENERATOR_UPPERCASE = string.ascii_uppercase  # Use: Uppercase alphabet of the generator. Type: str. Range: Any string.
PASSWORD_GENERATOR_LOWERCASE = string.ascii_lowercase  # Use: Lowercase alphabet of the generator. Type: str. Range: Any string.
PASSWORD_GENERATOR_DIGITS = string.digits  # Use: Digit alphabet of the generator. Type: str. Range: Any string.
PASSWORD_GENERATOR_SPECIALS = "!@#$%^&*"  # Use: Special characters of the generator. Type: str. Range: Subset of PASSWORD_SPECIAL_CHARS.

# Settings Defaults
AUTO_REDIRECT_DEFAULT = True  # Use: Whether a decrypted URL is opened automatically after the countdown. Type: bool. Range: True or False.
REDIRECT_DELAY_DEFAULT_SECONDS = 3  # Use: Default countdown in seconds before the automatic redirect. Type: int. Range: REDIRECT_DELAY_MIN_SECONDS to REDIRECT_DELAY_MAX_SECONDS.
REDIRECT_DELAY_MIN_SECONDS = 0  # Use: Minimum configurable redirect countdown in seconds. Type: int. Range: Non-negative integer.
REDIRECT_DELAY_MAX_SECONDS = 10  # Use: Maximum configurable redirect countdown in seconds. Type: int. Range: Positive integer.
SHOW_PASSWORD_STRENGTH_DEFAULT = True  # Use: Whether password strength is shown when sealing. Type: bool. Range: True or False.

# File and Directory Names
CONFIG_DIR_NAME = ".securelink"  # Use: Name of the hidden directory within the user's home directory where SecureLink stores its settings. Type: str. Range: Any valid directory name.
SETTINGS_FILE = "settings.json"  # Use: Filename for the persisted display settings. Type: str. Range: Any valid filename.

# User Messages
MSG_URL_REQUIRED = "URL is required"  # Use: Validator message for empty input. Type: str. Range: Any string.
MSG_URL_INVALID = "Invalid URL format"  # Use: Validator message for unparseable input. Type: str. Range: Any string.
MSG_URL_VALID = "Valid URL"  # Use: Validator message for accepted input. Type: str. Range: Any string.
MSG_ENTER_URL_AND_PASSWORD = "Please enter both URL and password"  # Use: Single encryption with a missing field. Type: str. Range: Any string.
MSG_ENTER_URLS_AND_PASSWORD = "Please enter URLs and password"  # Use: Bulk encryption with a missing field. Type: str. Range: Any string.
MSG_ENTER_PASSWORD = "Please enter a password"  # Use: Selection encryption without password. Type: str. Range: Any string.
MSG_ENTER_VALID_URL = "Please enter a valid URL"  # Use: Single encryption of an invalid URL. Type: str. Range: Any string.
MSG_NO_VALID_URLS = "No valid URLs found"  # Use: Bulk encryption where every line is invalid. Type: str. Range: Any string.
MSG_SELECT_URLS = "Please select URLs to encrypt"  # Use: Selection encryption with nothing selected. Type: str. Range: Any string.
MSG_ENCRYPTED_ONE = "URL encrypted successfully!"  # Use: Success message for one sealed URL. Type: str. Range: Any string.
MSG_ENCRYPTED_MANY = "{count} URLs encrypted successfully!"  # Use: Success message for several sealed URLs. Type: str (format string). Range: Must contain {count}.
MSG_ENCRYPTION_FAILED = "Encryption failed"  # Use: Generic message for an internal cipher failure. Type: str. Range: Any string.
MSG_FOUND_URLS = "Found {count} URLs"  # Use: Scan result message. Type: str (format string). Range: Must contain {count}.
MSG_NO_URLS_FOUND = "No URLs found"  # Use: Scan found nothing. Type: str. Range: Any string.
MSG_ENTER_DECRYPT_PASSWORD = "Please enter the password"  # Use: Decryption without password. Type: str. Range: Any string.
MSG_NO_TOKEN = "No encrypted data found in link"  # Use: Share link without a token. Type: str. Range: Any string.
MSG_DECRYPTION_FAILED = "Incorrect password"  # Use: Generic decryption failure, shared by wrong password and malformed token. Type: str. Range: Any string.
MSG_INCORRECT_PASSWORD_ATTEMPTS = "Incorrect password ({count} attempt{plural})"  # Use: Failed decryption message with the attempt counter. Type: str (format string). Range: Must contain {count} and {plural}.
MSG_DECRYPTED = "URL decrypted successfully"  # Use: Success message for an opened token. Type: str. Range: Any string.
MSG_REDIRECT_COUNTDOWN = "Redirecting in {seconds} seconds..."  # Use: Countdown line before the automatic redirect. Type: str (format string). Range: Must contain {seconds}.
MSG_REDIRECT_CANCELLED = "Redirect cancelled"  # Use: Shown when the user interrupts the countdown. Type: str. Range: Any string.
