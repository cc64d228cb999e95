"""
SecureLink URL Encryptor
Copyright (c) 2025

THREAT MODEL:
A SecureLink token protects a URL with a password only. There is no account,
no server-side copy and no recovery: a forgotten password loses the URL for
good. Anyone holding the token can try passwords offline, so the protection is
only as strong as the password and the key-derivation cost.
"""
