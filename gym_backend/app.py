# module gym_backend.app
from gym_backend.app_setup.factory import create_app

# App globale
app = create_app()
