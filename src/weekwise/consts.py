VERSION = "0.2.0"
APP_NAME = "weekwise"
