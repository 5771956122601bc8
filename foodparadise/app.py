# module foodparadise.app
from foodparadise.app_setup.factory import create_app

# App globale
app = create_app()
