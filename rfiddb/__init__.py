"""rfiddb — shared database connection for the RFID application."""
