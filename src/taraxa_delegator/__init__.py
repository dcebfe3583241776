"""taraxa_delegator - claim Taraxa DPOS rewards and re-delegate the balance."""

__version__ = "0.1.0"
