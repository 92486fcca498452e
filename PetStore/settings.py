from pathlib import Path
from dotenv import load_dotenv
import os
from datetime import timedelta

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv()

SECRET_KEY = os.getenv("SECRET_KEY", "dev-key-change-me")

DEBUG = os.getenv("DEBUG", "False") == "True"  # Cambiar en producción a False

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'corsheaders',
    'rest_framework',
    'rest_framework_simplejwt',
    'drf_yasg',
    'drf_spectacular',
    'api.suppliers',  # app para proveedores
    'api.products',  # app para productos e inventario
    'api.notifications',  # app para notificaciones de stock bajo
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    # Debe ir antes de CommonMiddleware para responder los preflight
    "corsheaders.middleware.CorsMiddleware",
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'api.middleware.not_found_middleware.NotFoundErrorMiddleware',
    # Middleware de seguridad para manejo de errores
    'api.middleware.secure_error_middleware.SecureErrorMiddleware',
    'api.middleware.secure_error_middleware.SecureDebugMiddleware',
]

ROOT_URLCONF = 'PetStore.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(BASE_DIR, 'templates')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'PetStore.wsgi.application'

DATABASES = {
    'default': {
        "ENGINE": "django.db.backends.mysql",
        "NAME": os.getenv("MYSQL_DATABASE"),
        "USER": os.getenv("MYSQL_USER"),
        "PASSWORD": os.getenv("MYSQL_PASSWORD"),
        'HOST': os.getenv("MYSQL_HOST"),
        'PORT': os.getenv("MYSQL_PORT"),
        "OPTIONS": {
            "charset": "utf8mb4",
            "sql_mode": "STRICT_TRANS_TABLES",
            "init_command": "SET sql_mode='STRICT_TRANS_TABLES'",
        },
    }
}

if os.getenv("USE_SQLITE_FOR_TESTS") == "1":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

# Agrupar migraciones en una sola carpeta
MIGRATION_MODULES = {
    'suppliers': 'migrations.suppliers',
    'products': 'migrations.products',
    'notifications': 'migrations.notifications',
}

# === CORS ===#
# Orígenes del frontend (Vercel y desarrollo local)
CORS_ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:3001,https://paw-home-inventory-system.vercel.app"
    ).split(",") if origin.strip()
]
# Previews y branches de Vercel, y cualquier puerto local
CORS_ALLOWED_ORIGIN_REGEXES = [
    r"^https://[\w.-]+\.vercel\.app$",
    r"^http://localhost:\d+$",
]
CORS_ALLOW_METHODS = (
    "DELETE",
    "GET",
    "OPTIONS",
    "PATCH",
    "POST",
    "PUT",
)
CORS_ALLOW_HEADERS = (
    "accept",
    "accept-encoding",
    "authorization",
    "content-type",
    "dnt",
    "origin",
    "user-agent",
    "x-csrftoken",
    "x-requested-with",
)
CORS_ALLOW_CREDENTIALS = True
CORS_EXPOSE_HEADERS = ["Authorization"]
CORS_PREFLIGHT_MAX_AGE = 3600  # 1 hora


AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

REST_FRAMEWORK = {
    # Authentication
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
    ),

    # Permissions
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),

    # Parsers
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],

    # Schema
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',

    # Pagination
    'DEFAULT_PAGINATION_CLASS': 'rest_framework.pagination.PageNumberPagination',
    'PAGE_SIZE': 100,

    # Renderers
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],

    # Throttling
    'DEFAULT_THROTTLE_CLASSES': [
        'rest_framework.throttling.UserRateThrottle',
        'rest_framework.throttling.AnonRateThrottle',
    ],
    'DEFAULT_THROTTLE_RATES': {
        'user': '10000/day',
        'anon': '5000/day',
    },
}


SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=40),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=1),
    "ROTATE_REFRESH_TOKENS": False,
    "BLACKLIST_AFTER_ROTATION": False,
    "UPDATE_LAST_LOGIN": False,

    "ALGORITHM": "HS256",
    "SIGNING_KEY": os.getenv("SECRET_KEY_JWT", SECRET_KEY),
}

LANGUAGE_CODE = 'es-ar'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.gmail.com")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
EMAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "True") == "True"
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD")
DEFAULT_FROM_EMAIL = os.getenv(
    "DEFAULT_FROM_EMAIL", EMAIL_HOST_USER or "noreply@pawhome.com")

# Destinatarios de alertas de stock bajo por email (separados por coma).
# Vacío = solo se registran notificaciones en base de datos.
LOW_STOCK_ALERT_EMAILS = [
    email.strip() for email in os.getenv("LOW_STOCK_ALERT_EMAILS", "").split(",")
    if email.strip()
]

# Configuración robusta de logging


def get_logging_config():
    """
    Retorna configuración de logging robusta que maneja diferentes entornos.
    """
    logs_dir = os.path.join(BASE_DIR, 'logs')

    # Intentar crear directorio de logs
    try:
        os.makedirs(logs_dir, exist_ok=True)
        file_logging_available = True
    except (OSError, PermissionError):
        file_logging_available = False

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '[{levelname}] {asctime} {name}: {message}',
                'style': '{',
            },
            'detailed': {
                'format': '[{levelname}] {asctime} {name} ({pathname}:{lineno}): {message}',
                'style': '{',
            },
            'security': {
                'format': '[SECURITY] {asctime} {name}: {message}',
                'style': '{',
            },
        },
        'filters': {
            'require_debug_false': {
                '()': 'django.utils.log.RequireDebugFalse',
            },
            'require_debug_true': {
                '()': 'django.utils.log.RequireDebugTrue',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
            },
            'console_debug': {
                'class': 'logging.StreamHandler',
                'formatter': 'detailed',
                'filters': ['require_debug_true'],
            },
            'security_log': {
                'class': 'logging.StreamHandler',
                'formatter': 'security',
                'level': 'WARNING',
            },
        },
        'loggers': {
            'django': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': True,
            },
            'api.middleware.secure_error_middleware': {
                'handlers': ['security_log'],
                'level': 'WARNING',
                'propagate': False,
            },
            # Movimientos de stock: siempre visibles en consola
            'api.products.services': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
            'api.notifications': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
            'api': {
                'handlers': ['console_debug'],
                'level': 'DEBUG',
                'propagate': False,
            },
        },
    }

    # Agregar logging a archivo solo si está disponible
    if file_logging_available:
        config['handlers']['error_file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(logs_dir, 'errors.log'),
            'maxBytes': 1024*1024*5,  # 5MB
            'backupCount': 5,
            'formatter': 'detailed',
            'level': 'ERROR',
        }
        for logger_name in ('api.middleware.secure_error_middleware',
                            'api.products.services',
                            'api.notifications'):
            config['loggers'][logger_name]['handlers'].append('error_file')

    return config


LOGGING = get_logging_config()

SPECTACULAR_SETTINGS = {
    'TITLE': '🐾 API Inventario Pet Store',
    'DESCRIPTION': '''
📄 Descripción
    API para la gestión del inventario de la tienda de mascotas: alta y baja lógica
    de productos, movimientos de stock, umbrales mínimos y notificaciones de stock bajo.

🔒 Autenticación
    Esta API utiliza **JWT (JSON Web Tokens)** con esquema Bearer para la autenticación.

🚀 Pasos para autenticarse:
    1. **Obtener Token**: POST a `/api/v2/token` con credenciales
    2. **Usar Token**: Incluir `Authorization: Bearer <token>` en headers
    3. **Renovar Token**: POST a `/api/v2/token/refresh` con refresh token

📋 Reglas de Negocio Principales

📦 Inventario:
    - El stock nunca puede quedar negativo
    - No pueden existir dos productos activos con el mismo nombre y proveedor
    - Un producto tiene stock bajo cuando stock <= umbral mínimo
    - La eliminación de productos es lógica (se desactivan)

🔔 Notificaciones:
    - Al disminuir stock se genera o refresca la notificación si queda en stock bajo
    - Al reponer stock por encima del umbral se eliminan sus notificaciones
    ''',
    'VERSION': '2.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'LICENSE': {
        'name': 'MIT License',
        'url': 'https://opensource.org/licenses/MIT'
    },
    'SERVERS': [
        {
            'url': 'http://localhost:8000',
            'description': 'Servidor de desarrollo'
        },
    ],
    'PREPROCESSING_HOOKS': ['PetStore.api_docs.preprocessing_filter_spec'],
    'POSTPROCESSING_HOOKS': ['PetStore.api_docs.postprocessing_hook'],
    'COMPONENT_SPLIT_REQUEST': True,
    'COMPONENT_NO_READ_ONLY_REQUIRED': True,
    'SWAGGER_UI_SETTINGS': {
        'deepLinking': True,
        'persistAuthorization': True,
        'displayOperationId': True,
        'docExpansion': 'none',
        'filter': True,
        'tryItOutEnabled': True,
    },
}

SWAGGER_SETTINGS = {
    'SECURITY_DEFINITIONS': {
        'Bearer': {
            'type': 'apiKey',
            'name': 'Authorization',
            'in': 'header',
            'description': 'JWT Authorization header using the Bearer scheme. Example: "Authorization: Bearer {token}"'
        }
    },
    'USE_SESSION_AUTH': False,
    'JSON_EDITOR': True,
    'SUPPORTED_SUBMIT_METHODS': [
        'get',
        'post',
        'put',
        'delete',
        'patch'
    ],
    'OPERATIONS_SORTER': 'alpha',
    'TAGS_SORTER': 'alpha',
    'DOC_EXPANSION': 'none',
    'DEEP_LINKING': True,
}

# Configuración de Redis (broker de Celery)
REDIS_HOST = os.getenv('REDIS_HOST', 'redis')
REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
REDIS_PASS = os.getenv('REDIS_PASSWORD', '')

# Configuración de Celery con Redis como broker y backend
if REDIS_PASS:
    CELERY_BROKER_URL = f"redis://:{REDIS_PASS}@{REDIS_HOST}:{REDIS_PORT}/2"
    CELERY_RESULT_BACKEND = f"redis://:{REDIS_PASS}@{REDIS_HOST}:{REDIS_PORT}/2"
else:
    CELERY_BROKER_URL = f"redis://{REDIS_HOST}:{REDIS_PORT}/2"
    CELERY_RESULT_BACKEND = f"redis://{REDIS_HOST}:{REDIS_PORT}/2"

# Serialización
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'

# Zona horaria
CELERY_TIMEZONE = TIME_ZONE
CELERY_ENABLE_UTC = True

# Conf Task
CELERY_TASK_TRACK_STARTED = True
CELERY_TASK_TIME_LIMIT = 10 * 60  # 10 minutos
CELERY_TASK_SOFT_TIME_LIMIT = 5 * 60  # 5 minutos
CELERY_RESULT_EXPIRES = 60 * 60  # 1 hora

# Workers
CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_WORKER_MAX_TASKS_PER_CHILD = 100

CELERY_TASK_REJECT_ON_WORKER_LOST = True
CELERY_TASK_ACKS_LATE = True

# Las alertas de stock van en su propia cola
CELERY_TASK_ROUTES = {
    'api.notifications.tasks.*': {
        'queue': 'notifications',
        'routing_key': 'notifications',
    },
}

CELERY_TASK_DEFAULT_QUEUE = 'default'
CELERY_TASK_QUEUES = {
    'default': {
        'exchange': 'default',
        'routing_key': 'default',
    },
    'notifications': {
        'exchange': 'notifications',
        'routing_key': 'notifications',
    },
}
