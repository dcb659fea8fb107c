from taskboard.models.comment import Comment


# ========== Lister / créer ==========

def test_assignee_creates_and_lists_comments(client, admin, alice, make_task, auth_header):
    task = make_task(admin, [alice])
    created = client.post(
        f"/tasks/{task.id}/comments", headers=auth_header(alice), json={"content": "Je m'en occupe"}
    )
    assert created.status_code == 201
    data = created.json()
    assert data["content"] == "Je m'en occupe"
    assert data["author_email"] == "alice@example.com"
    assert data["task_id"] == task.id
    assert data["created_at"]

    listed = client.get(f"/tasks/{task.id}/comments", headers=auth_header(alice))
    assert listed.status_code == 200
    assert [c["id"] for c in listed.json()] == [data["id"]]

def test_admin_comments_on_any_task(client, admin, alice, make_task, auth_header):
    task = make_task(admin, [alice])
    response = client.post(
        f"/tasks/{task.id}/comments", headers=auth_header(admin), json={"content": "Ok"}
    )
    assert response.status_code == 201

def test_comments_in_repository_order(client, admin, alice, make_task, make_comment, auth_header):
    task = make_task(admin, [alice])
    for content in ("one", "two", "three"):
        make_comment(task, alice, content)
    listed = client.get(f"/tasks/{task.id}/comments", headers=auth_header(admin)).json()
    assert [c["content"] for c in listed] == ["one", "two", "three"]

def test_outsider_cannot_list_or_create(client, admin, alice, bob, make_task, auth_header):
    task = make_task(admin, [alice])
    assert client.get(f"/tasks/{task.id}/comments", headers=auth_header(bob)).status_code == 403
    response = client.post(
        f"/tasks/{task.id}/comments", headers=auth_header(bob), json={"content": "hello"}
    )
    assert response.status_code == 403

def test_comments_of_missing_task(client, alice, auth_header):
    assert client.get("/tasks/404/comments", headers=auth_header(alice)).status_code == 404
    response = client.post("/tasks/404/comments", headers=auth_header(alice), json={"content": "x"})
    assert response.status_code == 404

def test_comment_requires_token(client, admin, alice, make_task):
    task = make_task(admin, [alice])
    assert client.get(f"/tasks/{task.id}/comments").status_code == 401

def test_comment_content_validation(client, admin, alice, make_task, auth_header):
    task = make_task(admin, [alice])
    for content in ("", "x" * 5001):
        response = client.post(
            f"/tasks/{task.id}/comments", headers=auth_header(alice), json={"content": content}
        )
        assert response.status_code == 400
    response = client.post(
        f"/tasks/{task.id}/comments", headers=auth_header(alice), json={"content": "x" * 5000}
    )
    assert response.status_code == 201


# ========== Modifier / supprimer ==========

def test_author_edits_comment(client, admin, alice, make_task, make_comment, auth_header):
    task = make_task(admin, [alice])
    comment = make_comment(task, alice, "v1")
    response = client.patch(
        f"/comments/{comment.id}", headers=auth_header(alice), json={"content": "v2"}
    )
    assert response.status_code == 200
    assert response.json()["content"] == "v2"
    assert response.json()["created_at"] == client.get(
        f"/tasks/{task.id}/comments", headers=auth_header(alice)
    ).json()[0]["created_at"]

def test_non_author_cannot_edit_or_delete(client, db, admin, alice, bob, make_task, make_comment, auth_header):
    task = make_task(admin, [alice, bob])
    comment = make_comment(task, alice, "original")

    edit = client.patch(f"/comments/{comment.id}", headers=auth_header(bob), json={"content": "hacked"})
    delete = client.delete(f"/comments/{comment.id}", headers=auth_header(bob))
    assert edit.status_code == 403
    assert delete.status_code == 403

    db.expire_all()
    assert db.get(Comment, comment.id).content == "original"

def test_admin_cannot_edit_or_delete_others_comment(client, admin, alice, make_task, make_comment, auth_header):
    task = make_task(admin, [alice])
    comment = make_comment(task, alice, "original")

    assert client.patch(
        f"/comments/{comment.id}", headers=auth_header(admin), json={"content": "x"}
    ).status_code == 403
    assert client.delete(f"/comments/{comment.id}", headers=auth_header(admin)).status_code == 403

def test_author_deletes_comment(client, db, admin, alice, make_task, make_comment, auth_header):
    task = make_task(admin, [alice])
    comment = make_comment(task, alice)
    comment_id = comment.id

    response = client.delete(f"/comments/{comment_id}", headers=auth_header(alice))
    assert response.status_code == 204

    db.expire_all()
    assert db.query(Comment).filter(Comment.id == comment_id).count() == 0

def test_edit_missing_comment(client, alice, auth_header):
    response = client.patch("/comments/999", headers=auth_header(alice), json={"content": "x"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Comment not found"

def test_author_keeps_edit_rights_after_unassignment(client, admin, alice, bob, make_task, make_comment, auth_header):
    """L'autorisation dépend de l'auteur, pas de l'assignation courante"""
    task = make_task(admin, [alice])
    comment = make_comment(task, alice)
    client.patch(f"/tasks/{task.id}", headers=auth_header(admin), json={"assignee_ids": [bob.id]})

    response = client.patch(
        f"/comments/{comment.id}", headers=auth_header(alice), json={"content": "still mine"}
    )
    assert response.status_code == 200
