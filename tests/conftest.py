import os

# No rotating log file during test runs
os.environ["LOG_FILE"] = ""
