def _write(client, title="A", content="B", file=None):
    files = {"file": file} if file else None
    return client.post(
        "/board/writepro", data={"title": title, "content": content}, files=files
    )


def _latest(client):
    return client.get("/board/list").context["page"].items[0]


def test_write_form(client):
    response = client.get("/board/write")

    assert response.status_code == 200
    assert response.template.name == "boardwrite.html"


def test_write_submit_renders_confirmation(client):
    response = _write(client)

    assert response.status_code == 200
    assert response.template.name == "message.html"
    assert response.context["message"] == "Post created."
    assert response.context["search_url"] == "/board/list"


def test_write_with_file_is_served_under_filepath(client):
    _write(client, file=("hello.txt", b"hello world", "text/plain"))
    post = _latest(client)

    assert post.filename.endswith("_hello.txt")
    download = client.get(post.filepath)
    assert download.status_code == 200
    assert download.content == b"hello world"


def test_write_blank_title_is_rejected(client):
    response = _write(client, title="  ")

    assert response.status_code == 422
    assert response.template.name == "error.html"
    assert response.context["error_code"] == "VALIDATION_ERROR"


def test_list_defaults_and_window(client):
    for i in range(25):
        _write(client, title=f"post {i}")

    response = client.get("/board/list")

    assert response.template.name == "boardlist.html"
    page = response.context["page"]
    assert len(page.items) == 10
    assert page.items[0].title == "post 24"
    assert page.total_pages == 3
    assert response.context["now_page"] == 1
    assert response.context["start_page"] == 1
    assert response.context["end_page"] == 3


def test_list_second_page(client):
    for i in range(25):
        _write(client, title=f"post {i}")

    response = client.get("/board/list", params={"page": 2, "size": 10})

    assert [p.title for p in response.context["page"].items] == [
        f"post {i}" for i in range(4, -1, -1)
    ]
    assert response.context["now_page"] == 3


def test_list_empty_board(client):
    response = client.get("/board/list")

    assert response.status_code == 200
    assert response.context["page"].total_elements == 0
    assert response.context["end_page"] == 0
    assert "No posts." in response.text


def test_list_with_search_keyword(client):
    for title in ["apple pie", "banana", "apple tart"]:
        _write(client, title=title)

    response = client.get("/board/list", params={"searchKeyword": "APPLE"})

    assert [p.title for p in response.context["page"].items] == [
        "apple tart",
        "apple pie",
    ]
    assert response.context["search_keyword"] == "APPLE"


def test_list_sort_by_title(client):
    for title in ["b", "c", "a"]:
        _write(client, title=title)

    response = client.get("/board/list", params={"sort": "title,asc"})

    assert [p.title for p in response.context["page"].items] == ["a", "b", "c"]


def test_list_rejects_bad_sort(client):
    assert client.get("/board/list", params={"sort": "secret,desc"}).status_code == 422
    assert client.get("/board/list", params={"sort": "id,sideways"}).status_code == 422


def test_view(client):
    _write(client, title="Hello", content="World")
    post = _latest(client)

    response = client.get("/board/view", params={"id": post.id})

    assert response.template.name == "boardview.html"
    assert response.context["board"].content == "World"


def test_view_missing_post_is_404(client):
    response = client.get("/board/view", params={"id": 404})

    assert response.status_code == 404
    assert response.template.name == "error.html"


def test_view_missing_post_json_error(client):
    response = client.get(
        "/board/view", params={"id": 404}, headers={"Accept": "application/json"}
    )

    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_view_requires_id(client):
    assert client.get("/board/view").status_code == 422


def test_delete_redirects_to_list(client):
    _write(client)
    post = _latest(client)

    response = client.get(
        "/board/delete", params={"id": post.id}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/board/list"
    assert client.get("/board/view", params={"id": post.id}).status_code == 404


def test_delete_missing_post_still_redirects(client):
    response = client.post("/board/delete", params={"id": 999}, follow_redirects=False)

    assert response.status_code == 303


def test_modify_form(client):
    _write(client, title="Edit me")
    post = _latest(client)

    response = client.get(f"/board/modify/{post.id}")

    assert response.template.name == "boardmodify.html"
    assert response.context["board"].title == "Edit me"


def test_modify_missing_post_is_404(client):
    assert client.get("/board/modify/31337").status_code == 404


def test_update_submit(client):
    _write(client, title="Old", content="Body", file=("a.txt", b"v1", "text/plain"))
    post = _latest(client)

    response = client.post(
        f"/board/update/{post.id}",
        data={"title": "New", "content": "Body"},
        files={"file": ("a.txt", b"v2", "text/plain")},
    )

    assert response.template.name == "message.html"
    assert response.context["message"] == "Post updated."
    updated = client.get("/board/view", params={"id": post.id}).context["board"]
    assert updated.title == "New"
    assert updated.content == "Body"
    assert updated.filename != post.filename
    assert client.get(updated.filepath).content == b"v2"


def test_update_missing_post_is_404(client):
    response = client.post("/board/update/5", data={"title": "t", "content": "c"})

    assert response.status_code == 404


def test_root_redirects_and_health(client):
    root = client.get("/", follow_redirects=False)

    assert root.headers["location"] == "/board/list"
    assert client.get("/health").json()["status"] == "healthy"


def test_update_with_empty_file_part_keeps_attachment(client):
    _write(client, title="Old", content="Body", file=("a.txt", b"v1", "text/plain"))
    post = _latest(client)

    response = client.post(
        f"/board/update/{post.id}",
        data={"title": "New", "content": "Body"},
        files={"file": ("", b"", "application/octet-stream")},
    )

    assert response.status_code == 200
    updated = client.get("/board/view", params={"id": post.id}).context["board"]
    assert updated.title == "New"
    assert updated.filename == post.filename
    assert updated.filepath == post.filepath


def test_out_of_range_ids_and_pages(client):
    _write(client)
    huge = 10**20

    view = client.get("/board/view", params={"id": huge})
    modify = client.get(f"/board/modify/{huge}")
    delete = client.get("/board/delete", params={"id": huge}, follow_redirects=False)
    listing = client.get("/board/list", params={"page": 10**18})

    assert view.status_code == 404
    assert modify.status_code == 404
    assert delete.status_code == 303
    assert listing.status_code == 200
    assert listing.context["page"].items == []
    assert listing.context["page"].total_elements == 1


def test_list_shows_next_and_previous_links(client):
    for i in range(3):
        _write(client, title=f"post {i}")

    first = client.get("/board/list", params={"size": 1})
    middle = client.get("/board/list", params={"page": 1, "size": 1})

    assert "Next" in first.text and "Prev" not in first.text
    assert "Next" in middle.text and "Prev" in middle.text
