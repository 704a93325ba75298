"""Aggregate sales reporting endpoints

This package computes summary statistics over stores, orders and order
items. The sales report comes in two flavours that return identical numbers:
an unoptimized one that pulls rows into Python and aggregates them there,
and an optimized one that lets the database join and aggregate in a single
query. Product and store rankings always aggregate in the database."""
