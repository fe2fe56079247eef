"""Operator guidance for bootstrapping the IRTA forms administrator."""
