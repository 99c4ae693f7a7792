"""
txn_validation package marker.
"""
