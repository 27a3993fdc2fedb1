"""
Command Line Interface Package

Command Structure:
- autotrackr: Main entry point with utility commands (version, config)
- autotrackr parse: Quick-entry parsing
- autotrackr totals: Totals and what-if figures for one flip
- autotrackr export: CSV and tax report exports from a ledger file
"""
