"""Qt user interface for Common Room."""
