from celery import Celery

from pos.config import get_settings

settings = get_settings()

# Create Celery application
celery_app = Celery(
    "pos",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["pos.tasks.inventory_tasks"]
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Single-machine installs can run tasks in-process without a worker
    task_always_eager=settings.CELERY_TASK_ALWAYS_EAGER,

    # Task settings
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max
    task_soft_time_limit=240,  # Soft limit 4 minutes

    # Worker settings
    worker_prefetch_multiplier=1,
    worker_concurrency=4,

    # A stock decrement is not idempotent: acknowledge on receipt so a
    # lost worker never replays it
    task_acks_late=False,
)
