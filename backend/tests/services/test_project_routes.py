"""Project Routes — detail, create, rename, archive, add language, set base language.

Invariants:
    - Unknown project id or ISO code → 404 with an empty body, including ids past the
      INTEGER key range and codes of any length
    - Missing/empty required fields → 400 with VALIDATION_ERROR envelope
    - Duplicate project name on create → 409, even for archived namesakes
    - Language already attached → 409, association unchanged
    - Rename never checks uniqueness
"""

from sqlalchemy import func, select

from translation_api.models import Project, project_languages


def _codes(project: dict) -> list[str]:
    return [lang["isoCode"] for lang in project["languages"]]


# ─── GET /projects/{id} ──────────────────────────────────────────

async def test_get_project_returns_full_dto(client, seed_projects):
    shared = seed_projects["shared"]

    res = await client.get(f"/projects/{shared.id}")

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == shared.id
    assert body["name"] == "Shared"
    assert body["archived"] is False
    assert body["baseLanguage"]["isoCode"] == "en"
    assert sorted(_codes(body)) == ["de", "en"]
    assert [i["identifier"] for i in body["identifiers"]] == ["key1", "key2"]


async def test_get_project_flattens_translation_language(client, seed_projects):
    res = await client.get(f"/projects/{seed_projects['base'].id}")

    identifier = res.json()["identifiers"][0]
    translation = identifier["translations"][0]
    assert translation == {
        "id": translation["id"],
        "translation": "translation2",
        "language": "de",
        "approved": True,
        "improvementNeeded": False,
    }


async def test_get_project_keeps_quotes_in_translation_text(client, seed_projects):
    res = await client.get(f"/projects/{seed_projects['shared'].id}")

    texts = [
        t["translation"]
        for i in res.json()["identifiers"] for t in i["translations"]
    ]
    assert texts == ["translation1", '"translation2"']


async def test_get_unknown_project_returns_empty_404(client, seed_projects):
    res = await client.get("/projects/9999")

    assert res.status_code == 404
    assert res.content == b""


async def test_get_project_with_non_integer_id_is_400(client, seed_projects):
    res = await client.get("/projects/not-a-number")
    assert res.status_code == 400


async def test_get_project_with_id_beyond_key_range_returns_empty_404(client, seed_projects):
    res = await client.get("/projects/99999999999999999999")

    assert res.status_code == 404
    assert res.content == b""


async def test_get_project_with_id_just_past_integer_column_returns_404(client, seed_projects):
    res = await client.get(f"/projects/{2**31}")
    assert res.status_code == 404


# ─── POST /projects ──────────────────────────────────────────────

async def test_create_project(client, languages):
    res = await client.post(
        "/projects", json={"name": "X", "baseLanguageCode": "en"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "X"
    assert body["archived"] is False
    assert body["baseLanguage"]["isoCode"] == "en"
    assert _codes(body) == ["en"]
    assert body["identifiers"] == []


async def test_created_project_is_readable(client, languages):
    created = (await client.post(
        "/projects", json={"name": "X", "baseLanguageCode": "en"},
    )).json()

    res = await client.get(f"/projects/{created['id']}")

    assert res.status_code == 200
    assert _codes(res.json()) == ["en"]
    assert res.json()["baseLanguage"]["isoCode"] == "en"


async def test_create_duplicate_name_conflicts(client, seed_projects):
    res = await client.post(
        "/projects", json={"name": "Shared", "baseLanguageCode": "de"},
    )

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONFLICT"
    assert res.json()["error"]["message"] == "Project with same name already exists"


async def test_create_duplicate_of_archived_name_conflicts(client, seed_projects):
    res = await client.post(
        "/projects", json={"name": "Archived", "baseLanguageCode": "en"},
    )
    assert res.status_code == 409


async def test_create_duplicate_name_conflicts_before_language_lookup(client, seed_projects):
    res = await client.post(
        "/projects", json={"name": "Shared", "baseLanguageCode": "xx"},
    )
    assert res.status_code == 409


async def test_create_name_match_is_case_sensitive(client, seed_projects):
    res = await client.post(
        "/projects", json={"name": "shared", "baseLanguageCode": "en"},
    )
    assert res.status_code == 201


async def test_create_with_unknown_language_persists_nothing(client, languages, fresh_db):
    res = await client.post(
        "/projects", json={"name": "Nowhere", "baseLanguageCode": "xx"},
    )

    assert res.status_code == 404
    assert res.content == b""
    async with fresh_db() as db:
        count = await db.scalar(select(func.count()).select_from(Project))
    assert count == 0


async def test_create_with_long_unknown_language_code_returns_404(client, languages):
    res = await client.post(
        "/projects", json={"name": "Long", "baseLanguageCode": "x" * 17},
    )
    assert res.status_code == 404


async def test_create_language_code_is_case_sensitive(client, languages):
    res = await client.post(
        "/projects", json={"name": "Upper", "baseLanguageCode": "EN"},
    )
    assert res.status_code == 404


async def test_create_requires_name(client, languages):
    res = await client.post("/projects", json={"baseLanguageCode": "en"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("name") for d in error["details"])


async def test_create_rejects_empty_fields(client, languages):
    res = await client.post("/projects", json={"name": "", "baseLanguageCode": ""})
    assert res.status_code == 400


async def test_create_rejects_non_json_body(client, languages):
    res = await client.post(
        "/projects", content=b"name=X", headers={"content-type": "text/plain"},
    )
    assert res.status_code == 400


# ─── rename ──────────────────────────────────────────────────────

async def test_rename_project_with_patch(client, seed_projects):
    base = seed_projects["base"]

    res = await client.patch(f"/projects/{base.id}/rename", json={"name": "Renamed"})

    assert res.status_code == 200
    assert res.json()["name"] == "Renamed"
    assert (await client.get(f"/projects/{base.id}")).json()["name"] == "Renamed"


async def test_rename_project_with_post(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(f"/projects/{base.id}/rename", json={"name": "Posted"})

    assert res.status_code == 200
    assert res.json()["name"] == "Posted"


async def test_rename_to_existing_name_is_allowed(client, seed_projects):
    base = seed_projects["base"]

    res = await client.patch(f"/projects/{base.id}/rename", json={"name": "Shared"})

    assert res.status_code == 200
    names = [p["name"] for p in (await client.get("/projects/active")).json()]
    assert names == ["Shared", "Shared"]


async def test_rename_unknown_project_returns_404(client, seed_projects):
    res = await client.patch("/projects/9999/rename", json={"name": "Ghost"})
    assert res.status_code == 404


async def test_rename_requires_name(client, seed_projects):
    res = await client.patch(f"/projects/{seed_projects['base'].id}/rename", json={})
    assert res.status_code == 400


# ─── archive ─────────────────────────────────────────────────────

async def test_archive_project(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(f"/projects/{base.id}/archive")

    assert res.status_code == 200
    assert res.json()["archived"] is True
    archived = (await client.get("/projects/archived")).json()
    assert base.id in [p["id"] for p in archived]


async def test_archive_is_idempotent(client, seed_projects):
    base = seed_projects["base"]

    first = await client.post(f"/projects/{base.id}/archive")
    second = await client.post(f"/projects/{base.id}/archive")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["archived"] is True


async def test_archive_unknown_project_returns_404(client, seed_projects):
    res = await client.post("/projects/9999/archive")
    assert res.status_code == 404


async def test_mutations_on_id_beyond_key_range_return_404(client, seed_projects):
    huge = "99999999999999999999"

    archive = await client.post(f"/projects/{huge}/archive")
    rename = await client.patch(f"/projects/{huge}/rename", json={"name": "Ghost"})
    add = await client.post(f"/projects/{huge}/languages", json={"languageCode": "en"})

    assert [archive.status_code, rename.status_code, add.status_code] == [404, 404, 404]


# ─── POST /projects/{id}/languages ───────────────────────────────

async def test_add_language(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(f"/projects/{base.id}/languages", json={"languageCode": "en"})

    assert res.status_code == 200
    assert _codes(res.json()) == ["de", "en"]
    assert res.json()["baseLanguage"]["isoCode"] == "de"


async def test_add_language_twice_conflicts_and_keeps_single_entry(
    client, seed_projects, fresh_db,
):
    base = seed_projects["base"]

    first = await client.post(f"/projects/{base.id}/languages", json={"languageCode": "es"})
    second = await client.post(f"/projects/{base.id}/languages", json={"languageCode": "es"})

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json()["error"]["message"] == "Project already contains language"
    assert _codes((await client.get(f"/projects/{base.id}")).json()) == ["de", "es"]
    async with fresh_db() as db:
        rows = await db.scalar(
            select(func.count()).select_from(project_languages)
            .where(project_languages.c.project_id == base.id),
        )
    assert rows == 2


async def test_add_already_attached_base_language_conflicts(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(f"/projects/{base.id}/languages", json={"languageCode": "de"})

    assert res.status_code == 409


async def test_add_unknown_language_returns_404(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(f"/projects/{base.id}/languages", json={"languageCode": "xx"})

    assert res.status_code == 404
    assert _codes((await client.get(f"/projects/{base.id}")).json()) == ["de"]


async def test_add_long_unknown_language_code_returns_404(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(
        f"/projects/{base.id}/languages", json={"languageCode": "x" * 17},
    )

    assert res.status_code == 404
    assert res.content == b""


async def test_add_language_to_unknown_project_returns_404(client, seed_projects):
    res = await client.post("/projects/9999/languages", json={"languageCode": "en"})
    assert res.status_code == 404


async def test_add_language_requires_language_code(client, seed_projects):
    res = await client.post(
        f"/projects/{seed_projects['base'].id}/languages", json={"isoCode": "en"},
    )
    assert res.status_code == 400


# ─── POST /projects/{id}/baseLanguage ────────────────────────────

async def test_set_base_language_appends_missing_language(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(
        f"/projects/{base.id}/baseLanguage", json={"languageCode": "es"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["baseLanguage"]["isoCode"] == "es"
    assert _codes(body) == ["de", "es"]


async def test_set_base_language_to_attached_language_does_not_duplicate(
    client, seed_projects,
):
    shared = seed_projects["shared"]

    res = await client.post(
        f"/projects/{shared.id}/baseLanguage", json={"languageCode": "de"},
    )

    assert res.status_code == 200
    codes = _codes(res.json())
    assert res.json()["baseLanguage"]["isoCode"] == "de"
    assert sorted(codes) == ["de", "en"]


async def test_set_base_language_on_project_without_languages(client, seed_projects):
    archived = seed_projects["archived"]

    res = await client.post(
        f"/projects/{archived.id}/baseLanguage", json={"languageCode": "en"},
    )

    assert res.status_code == 200
    assert _codes(res.json()) == ["en"]


async def test_set_unknown_base_language_returns_404(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(
        f"/projects/{base.id}/baseLanguage", json={"languageCode": "xx"},
    )

    assert res.status_code == 404
    assert (await client.get(f"/projects/{base.id}")).json()["baseLanguage"]["isoCode"] == "de"


async def test_set_long_unknown_base_language_code_returns_404(client, seed_projects):
    base = seed_projects["base"]

    res = await client.post(
        f"/projects/{base.id}/baseLanguage", json={"languageCode": "x" * 17},
    )

    assert res.status_code == 404
    assert (await client.get(f"/projects/{base.id}")).json()["baseLanguage"]["isoCode"] == "de"


async def test_set_base_language_on_unknown_project_returns_404(client, seed_projects):
    res = await client.post("/projects/9999/baseLanguage", json={"languageCode": "en"})
    assert res.status_code == 404


async def test_set_base_language_requires_language_code(client, seed_projects):
    res = await client.post(
        f"/projects/{seed_projects['base'].id}/baseLanguage", json={"languageCode": ""},
    )
    assert res.status_code == 400
