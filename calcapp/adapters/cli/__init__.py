"""Command-line interface adapter.

Provides a command handler that maps calculator and user commands to
the CalculatorPort and UserServicePort driving ports.
"""
