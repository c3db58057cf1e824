import html


def ok(res) -> bool:
    return res is not None and res.status_code == 200


def response_message(res, fallback: str) -> str:
    """Error text from an API reply: the backend's ``detail``, else ``message``, else ``fallback``."""
    if res is None:
        return fallback
    try:
        body = res.json()
    except ValueError:
        return fallback
    if not isinstance(body, dict):
        return fallback
    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    return body.get("message") or fallback


def pdf_iframe(file_url: str) -> str:
    src = html.escape(f"{file_url}#toolbar=1", quote=True)
    return f"<iframe src='{src}' class='pdf-frame' title='PDF Viewer'></iframe>"


def upload_and_save(post, file_name: str, file_bytes: bytes, title: str):
    """Upload the PDF, then persist a document for it.

    ``post`` is called as ``post(path, files=..., json=...)`` and returns a
    response or None. Returns ``(document_id, None)`` on success and
    ``(None, error_message)`` when either step fails.
    """
    res = post("/api/uploads", files={"file": (file_name, file_bytes, "application/pdf")})
    if not ok(res):
        return None, f"Upload Error: {response_message(res, 'Upload failed')}"
    result = res.json()
    saved = post(
        "/api/summaries",
        json={
            "title": (title or "").strip(),
            "fileName": result["name"],
            "fileUrl": result["url"],
            "fileKey": result["key"],
            "fileSize": result["size"],
        },
    )
    if not ok(saved):
        return None, response_message(saved, "Failed to save document")
    body = saved.json()
    if body.get("success") and body.get("documentId"):
        return body["documentId"], None
    return None, "Failed to save document"


def upload_once(state, post, file_name: str, file_bytes: bytes, title: str):
    """Run :func:`upload_and_save` unless this file was already saved.

    ``state`` is the session mapping; the file is only remembered once its
    document exists, so a failed save is retried on the next run.
    """
    upload_id = f"{file_name}:{len(file_bytes)}"
    if state.get("last_upload_id") == upload_id:
        return None, None
    document_id, error = upload_and_save(post, file_name, file_bytes, title)
    if document_id is not None:
        state["last_upload_id"] = upload_id
    return document_id, error
