"""Work-shift attribution package.

Businesses define named time-of-day shifts; every transaction is stamped with
the shift active at the moment it was created. The package is organized by
feature modules (shifts, transactions) with a thin Flask controller layer and
service/repository layers underneath.
"""
