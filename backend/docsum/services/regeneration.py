import logging
from redis import Redis
from rq import Queue
from docsum.core.config import settings
from docsum.models import Document
from docsum.schemas.summary import RegenerationRequest

logger = logging.getLogger(__name__)


def get_queue() -> Queue:
    redis_conn = Redis.from_url(settings.redis_url)
    return Queue(settings.rq_queue_name, connection=redis_conn, default_timeout=settings.rq_default_timeout)


def enqueue_generation(document: Document, options: RegenerationRequest | None = None) -> str:
    """Hand the document to the summarization pipeline worker and return the job id.

    The task is referenced by its dotted path; the worker that runs it lives with the pipeline.
    """
    payload = (options or RegenerationRequest()).model_dump()
    queue = get_queue()
    job = queue.enqueue(settings.summary_pipeline_task, document.id, payload)
    logger.info(
        "Summary generation enqueued",
        extra={"document_id": document.id, "job_id": job.id, "regenerate": options is not None},
    )
    return job.id
