# helprob: decoy web service + telemetry ledger

__version__ = "0.1.0"
