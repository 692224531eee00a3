def test_popular_listing_is_paginated(client, catalogue):
    resp = client.get("/api/videos", params={"filter": "popular", "page": 1, "limit": 5})
    assert resp.status_code == 200
    data = resp.json()
    views = [video["views"] for video in data["videos"]]
    assert len(views) == 5
    assert views == sorted(views, reverse=True)
    assert data["pagination"] == {"page": 1, "limit": 5, "total": 12, "totalPages": 3}


def test_listing_defaults(client, catalogue):
    resp = client.get("/api/videos")
    assert resp.status_code == 200
    data = resp.json()
    assert data["pagination"]["page"] == 1
    assert data["pagination"]["limit"] == 12
    assert len(data["videos"]) == 12
    assert all(video["isActive"] for video in data["videos"])
    dates = [video["datePosted"] for video in data["videos"]]
    assert dates == sorted(dates, reverse=True)


def test_listing_uses_camel_case_keys(client, catalogue):
    video = client.get("/api/videos", params={"limit": 1}).json()["videos"][0]
    for key in ("id", "title", "description", "thumbnailUrl", "videoUrl", "tags", "category",
                "views", "likes", "isActive", "datePosted", "createdAt", "updatedAt"):
        assert key in video


def test_listing_by_category(client, catalogue):
    data = client.get("/api/videos", params={"category": "Design"}).json()
    assert data["videos"]
    assert {video["category"] for video in data["videos"]} == {"Design"}
    assert data["pagination"]["total"] == len(data["videos"])


def test_last_page_is_partial(client, catalogue):
    data = client.get("/api/videos", params={"page": 3, "limit": 5}).json()
    assert len(data["videos"]) == 2


def test_invalid_page_is_rejected(client):
    resp = client.get("/api/videos", params={"page": 0})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "page"


def test_huge_page_is_rejected(client, catalogue):
    resp = client.get("/api/videos", params={"page": 10**19})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "page"


def test_limit_is_clamped(client, catalogue):
    data = client.get("/api/videos", params={"limit": 5000}).json()
    assert data["pagination"]["limit"] == 100
    assert data["pagination"]["totalPages"] == 1


def test_popular_and_latest_endpoints(client, catalogue):
    popular = client.get("/api/videos/popular").json()
    assert len(popular) == 10
    assert [v["views"] for v in popular] == sorted((v["views"] for v in popular), reverse=True)

    latest = client.get("/api/videos/latest", params={"limit": 4}).json()
    assert len(latest) == 4
    assert all(video["isActive"] for video in latest)


def test_get_video(client, catalogue):
    video_id = client.get("/api/videos", params={"limit": 1}).json()["videos"][0]["id"]
    resp = client.get(f"/api/videos/{video_id}")
    assert resp.status_code == 200
    assert resp.json()["id"] == video_id


def test_get_missing_video(client):
    resp = client.get("/api/videos/4242")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Video not found"}


def test_track_view(client, repo, catalogue):
    video = client.get("/api/videos", params={"limit": 1}).json()["videos"][0]
    resp = client.post(f"/api/videos/{video['id']}/view", headers={"User-Agent": "pytest-agent"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "View tracked successfully"}

    after = client.get(f"/api/videos/{video['id']}").json()
    assert after["views"] == video["views"] + 1
    assert repo.count_view_events(video["id"]) == 1


def test_track_view_for_missing_video(client, repo):
    resp = client.post("/api/videos/999/view")
    assert resp.status_code == 404
    assert repo.count_view_events(999) == 0


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
