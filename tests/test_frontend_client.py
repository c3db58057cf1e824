from summaries_client import ok, pdf_iframe, response_message, upload_and_save, upload_once


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no json body")
        return self._body


UPLOADED = {"url": "http://files.test/files/abc_report.pdf", "key": "abc_report.pdf", "name": "report.pdf", "size": 9}


def make_post(*responses):
    calls = []
    replies = list(responses)

    def post(path, files=None, json=None):
        calls.append((path, files, json))
        return replies.pop(0)

    post.calls = calls
    return post


def test_ok_needs_a_200_response():
    assert ok(FakeResponse(200, {}))
    assert not ok(FakeResponse(500, {}))
    assert not ok(None)


def test_response_message_reads_backend_detail():
    res = FakeResponse(413, {"detail": "Upload too large"})
    assert response_message(res, "Upload failed") == "Upload too large"


def test_response_message_falls_back():
    assert response_message(FakeResponse(400, {"message": "legacy"}), "x") == "legacy"
    assert response_message(FakeResponse(502), "Upload failed") == "Upload failed"
    assert response_message(None, "Upload failed") == "Upload failed"
    assert response_message(FakeResponse(422, {"detail": [{"msg": "field required"}]}), "bad") == "bad"
    assert response_message(FakeResponse(500, ["oops"]), "bad") == "bad"


def test_pdf_iframe_escapes_url():
    markup = pdf_iframe("http://files.test/a.pdf' onload='alert(1)")
    assert "' onload='" not in markup
    assert "&#x27; onload=&#x27;alert(1)#toolbar=1" in markup
    assert markup.startswith("<iframe src='http://files.test/a.pdf")


def test_upload_and_save_returns_document_id():
    post = make_post(FakeResponse(200, UPLOADED), FakeResponse(200, {"success": True, "documentId": 7}))
    assert upload_and_save(post, "report.pdf", b"%PDF-1.4", "  Q3 Report ") == (7, None)
    path, _, body = post.calls[1]
    assert path == "/api/summaries"
    assert body == {
        "title": "Q3 Report",
        "fileName": "report.pdf",
        "fileUrl": UPLOADED["url"],
        "fileKey": "abc_report.pdf",
        "fileSize": 9,
    }


def test_upload_failure_shows_server_detail():
    post = make_post(FakeResponse(400, {"detail": "Only PDF files are supported"}))
    document_id, error = upload_and_save(post, "notes.pdf", b"x", "")
    assert document_id is None
    assert error == "Upload Error: Only PDF files are supported"
    assert len(post.calls) == 1


def test_save_failure_reports_error_without_document():
    post = make_post(FakeResponse(200, UPLOADED), FakeResponse(500, {"detail": "Internal server error"}))
    assert upload_and_save(post, "report.pdf", b"%PDF", "") == (None, "Internal server error")


def test_save_without_document_id_uses_default_message():
    post = make_post(FakeResponse(200, UPLOADED), FakeResponse(200, {"success": False}))
    assert upload_and_save(post, "report.pdf", b"%PDF", "") == (None, "Failed to save document")


def test_unreachable_backend_on_save():
    post = make_post(FakeResponse(200, UPLOADED), None)
    assert upload_and_save(post, "report.pdf", b"%PDF", "") == (None, "Failed to save document")


def test_failed_save_is_retried_on_next_run():
    state = {}
    failing = make_post(FakeResponse(200, UPLOADED), FakeResponse(500, {"detail": "Internal server error"}))
    assert upload_once(state, failing, "report.pdf", b"%PDF", "") == (None, "Internal server error")
    assert "last_upload_id" not in state

    working = make_post(FakeResponse(200, UPLOADED), FakeResponse(200, {"success": True, "documentId": 3}))
    assert upload_once(state, working, "report.pdf", b"%PDF", "") == (3, None)
    assert state["last_upload_id"] == "report.pdf:4"


def test_saved_file_is_not_uploaded_again():
    state = {"last_upload_id": "report.pdf:4"}
    post = make_post()
    assert upload_once(state, post, "report.pdf", b"%PDF", "") == (None, None)
    assert post.calls == []
