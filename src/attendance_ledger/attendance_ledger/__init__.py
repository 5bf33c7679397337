"""Attendance Ledger package.

Feature modules (geo, shifts, attendance, ledger, ...) hold the pure engine and
its services; Flask controllers and the store adapters are thin layers around
them.
"""
