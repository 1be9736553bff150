import os
import threading


class ClientSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.FILESHARE_API_VERSION = os.environ.get("FILESHARE_API_VERSION", "2018-03-28")
        self.FILESHARE_TIMEOUT = float(os.environ.get("FILESHARE_TIMEOUT", 30.0))

        # Sent as User-Agent on every request unless the pipeline overrides it
        self.FILESHARE_USER_AGENT = os.environ.get("FILESHARE_USER_AGENT", "fileshare-client-python")

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(ClientSettings, cls).__new__(cls)
        return cls._instance

settings = ClientSettings()
