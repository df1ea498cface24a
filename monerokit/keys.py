"""Key derivation from a mnemonic seed.

Stateless wrappers around the engine's derivation routines. The engine
does the math; these functions only shape the arguments. Identical inputs
always give identical outputs.
"""

from monerokit.interfaces.engine import WalletEngine


def get_private_spend_key(engine: WalletEngine, mnemonic: str, passphrase: str) -> str:
    return engine.derive_key(mnemonic, passphrase, True, True)


def get_public_spend_key(engine: WalletEngine, mnemonic: str, passphrase: str) -> str:
    return engine.derive_key(mnemonic, passphrase, False, True)


def get_private_view_key(engine: WalletEngine, mnemonic: str, passphrase: str) -> str:
    return engine.derive_key(mnemonic, passphrase, True, False)


def get_public_view_key(engine: WalletEngine, mnemonic: str, passphrase: str) -> str:
    return engine.derive_key(mnemonic, passphrase, False, False)


def get_address(
    engine: WalletEngine,
    mnemonic: str,
    passphrase: str,
    account_index: int,
    address_index: int,
) -> str:
    """Derive the address at (account_index, address_index).

    Always derives a non-testnet address, whatever network the caller is
    on.
    """
    # TODO: take a NetworkType once the engine's derive_address accepts stagenet
    return engine.derive_address(mnemonic, passphrase, account_index, address_index, False)
