from algotxn.sdk import constants, encoding, error  # noqa F401
