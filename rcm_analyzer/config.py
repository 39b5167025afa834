import os

_data_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data')


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'a_default_secret_key')
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # 'sqlalchemy' persists the custom overlay in the database, 'memory' keeps it per process
    STORE_BACKEND = os.environ.get('STORE_BACKEND', 'sqlalchemy')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URI', 'sqlite:///' + os.path.join(_data_dir, 'rcm.db'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STORE_BACKEND = 'memory'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'


class ProductionConfig(Config):
    """Production configuration."""
    # In production, this should point to a PostgreSQL database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URI')


config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
