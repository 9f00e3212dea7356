SECRET_KEY = 'nfa-simulator-tests'

INSTALLED_APPS = [
    'nfa_simulator',
]

DATABASES = {}

USE_TZ = True
