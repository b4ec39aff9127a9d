"""FreightDesk ledger: derivation and statements for a freight back office."""

__version__ = "0.1.0"
