import os
from fastapi.templating import Jinja2Templates
from app.paths import LOGIN_PATH

basedir = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.join(basedir, "static")

templates = Jinja2Templates(directory=os.path.join(basedir, "templates"))
templates.env.globals["LOGIN_PATH"] = LOGIN_PATH
templates.env.globals["APP_TITLE"] = "Growth OS"
