import os

from githook.utils import environ_get


class DefaultConfig:
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "secrettoeveryone")
    # The Transport class used for outbound calls, chosen per environment.
    TRANSPORT = "githook.transport.HttpTransport"


class DevelopmentConfig(DefaultConfig):
    DEBUG = True


class TestingConfig(DefaultConfig):
    TESTING = True
    TRANSPORT = "githook.transport.RecordingTransport"


class ProductionConfig(DefaultConfig):
    def __init__(self):
        # No default secret key or deployment URL in production.
        self.SECRET_KEY = environ_get("FLASK_SECRET_KEY")
        self.DEPLOYMENT_URL = environ_get("DEPLOYMENT_URL")
