from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import admin
from . import services
from . import gallery
from . import leads
from . import team
from . import trusted_companies
from . import settings
from . import public
