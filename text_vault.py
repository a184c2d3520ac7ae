# text_vault.py
import os
import json
import logging

from cipher_profiles import available_profiles, get_profile
from text_crypto import encrypt_text, decrypt_text
from text_crypto_errors import TextCryptoError, UnknownProfileError

logger = logging.getLogger(__name__)

# ---------- Config / storage ----------
DATA_DIR = os.path.abspath(os.environ.get("TEXTCRYPT_DATA_DIR", "."))
VAULT_FILE = os.path.join(DATA_DIR, os.environ.get("TEXTCRYPT_VAULT_FILE", "vault.json"))
DEFAULT_PROFILE = os.environ.get("TEXTCRYPT_PROFILE", "aes_256_cbc")
LOG_LEVEL = os.environ.get("TEXTCRYPT_LOG_LEVEL", "WARNING")


# ---------- Helpers for JSON ----------
def load_json(path, default):
    if not os.path.exists(path):
        return default.copy()
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read %s: %s", path, e)
        return default.copy()
    if not isinstance(data, type(default)):
        logger.warning("%s does not hold a JSON %s, ignoring it", path, type(default).__name__)
        return default.copy()
    return data


def save_json(path, data):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


# ---------- Note operations ----------
def store_note(title: str, text: str, password: str, profile_name=DEFAULT_PROFILE, path=VAULT_FILE):
    title = title.strip()
    if not title:
        return False, "Title cannot be empty"
    notes = load_json(path, {})
    if title in notes:
        return False, "Note already exists"
    try:
        profile = get_profile(profile_name)
        blob = encrypt_text(text, password, profile)
    except TextCryptoError as e:
        return False, str(e)
    notes[title] = {"profile": profile.name, "blob": blob}
    save_json(path, notes)
    logger.info("stored note %r with %s", title, profile.name)
    return True, "Note stored"


def read_note(title: str, password: str, path=VAULT_FILE):
    title = title.strip()
    notes = load_json(path, {})
    if title not in notes:
        return False, "Note not found"
    entry = notes[title]
    try:
        text = decrypt_text(entry["blob"], password, entry.get("profile", DEFAULT_PROFILE), strict=True)
    except TextCryptoError as e:
        return False, f"Decryption failed: {e}"
    return True, text


def list_notes(path=VAULT_FILE):
    notes = load_json(path, {})
    return sorted((title, entry.get("profile", DEFAULT_PROFILE)) for title, entry in notes.items())


def remove_note(title: str, path=VAULT_FILE):
    title = title.strip()
    notes = load_json(path, {})
    if notes.pop(title, None) is None:
        return False, "Note not found"
    save_json(path, notes)
    logger.info("removed note %r", title)
    return True, f"Note '{title}' removed"


# ---------- Menu actions ----------
def _choose_profile():
    name = input(f"Cipher profile [{DEFAULT_PROFILE}]: ").strip()
    return name or DEFAULT_PROFILE


def store_note_prompt(path):
    title = input("Enter note title: ")
    text = input("Enter note text: ")
    password = input("Enter password to encrypt the note: ")
    ok, msg = store_note(title, text, password, _choose_profile(), path)
    print(msg)


def read_note_prompt(path):
    title = input("Enter note title: ")
    password = input("Enter password to decrypt the note: ")
    ok, res = read_note(title, password, path)
    if ok:
        print(f"Note '{title}' content:\n{res}")
    else:
        print(res)


def list_notes_prompt(path):
    print("\nNotes:")
    notes = list_notes(path)
    if not notes:
        print("  (none)")
    for title, profile in notes:
        print(f"  - {title} ({profile})")


def remove_note_prompt(path):
    title = input("Enter the note title to remove: ")
    ok, msg = remove_note(title, path)
    print(msg)


def quick_encrypt_prompt():
    text = input("Enter text to encrypt: ")
    password = input("Enter password: ")
    try:
        print(encrypt_text(text, password, _choose_profile()))
    except TextCryptoError as e:
        print(f"Encryption failed: {e}")


def quick_decrypt_prompt():
    blob = input("Enter encrypted text: ").strip()
    password = input("Enter password: ")
    try:
        print(decrypt_text(blob, password, _choose_profile(), strict=True))
    except TextCryptoError as e:
        print(f"Decryption failed: {e}")


def list_profiles_prompt():
    print("\nCipher profiles:")
    for name in available_profiles():
        p = get_profile(name)
        print(f"  {name}: key {p.key_length * 8} bits, IV {p.iv_length} bytes")


# Main Function
def main(path=None):
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    path = path or VAULT_FILE
    try:
        get_profile(DEFAULT_PROFILE)
    except UnknownProfileError as e:
        print(f"{e}. Check TEXTCRYPT_PROFILE.")
        return 2

    actions = {
        "1": lambda: store_note_prompt(path),
        "2": lambda: read_note_prompt(path),
        "3": lambda: list_notes_prompt(path),
        "4": lambda: remove_note_prompt(path),
        "5": quick_encrypt_prompt,
        "6": quick_decrypt_prompt,
        "7": list_profiles_prompt,
    }
    while True:
        print("\nEncrypted Note Vault")
        print("1. Store Note")
        print("2. Read Note")
        print("3. List Notes")
        print("4. Remove Note")
        print("5. Encrypt Text")
        print("6. Decrypt Text")
        print("7. List Cipher Profiles")
        print("8. Exit")

        choice = input("Enter choice: ").strip()
        if choice == "8":
            print("Exiting the vault.")
            return 0
        action = actions.get(choice)
        if action is None:
            print("Invalid choice.")
            continue
        action()


if __name__ == "__main__":
    raise SystemExit(main())
