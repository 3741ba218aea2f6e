import pytest
from sqlalchemy.exc import IntegrityError

from accounts.models import Comment, Post, User
from accounts.repositories import USER_RELATIONS, UserRepository


def _user(email, **kwargs):
    return User(email=email, password="hashed", **kwargs)


@pytest.fixture
def repo(db):
    return UserRepository(db)


@pytest.mark.asyncio
async def test_save_assigns_id(repo):
    user = await repo.save(_user("a@example.com"))
    assert user.id is not None


@pytest.mark.asyncio
async def test_find_one_by_filters(repo):
    await repo.save(_user("a@example.com", first_name="Ann"))
    await repo.save(_user("b@example.com", first_name="Ann"))

    user = await repo.find_one_by(first_name="Ann", email="b@example.com")
    assert user.email == "b@example.com"
    assert await repo.find_one_by(email="none@example.com") is None


@pytest.mark.asyncio
async def test_find_skips_none_conditions(repo):
    await repo.save(_user("a@example.com", first_name="Ann", last_name="Lee"))
    await repo.save(_user("b@example.com", first_name="Ben", last_name="Lee"))

    users = await repo.find(where={"first_name": None, "last_name": "Lee"})
    assert len(users) == 2

    users = await repo.find(where={"first_name": "Ben", "last_name": "Lee"})
    assert [u.email for u in users] == ["b@example.com"]


@pytest.mark.asyncio
async def test_find_one_with_relations(repo, db):
    author = await repo.save(_user("author@example.com"))
    fan = await repo.save(_user("fan@example.com", likes=[author], favorites=[author]))

    post = Post(title="hello", body="world", author_id=author.id)
    db.add(post)
    await db.commit()
    db.add(Comment(text="nice", author_id=fan.id, post_id=post.id))
    await db.commit()

    db.expunge_all()
    loaded = await repo.find_one(fan.id, relations=USER_RELATIONS)
    assert [u.id for u in loaded.likes] == [author.id]
    assert [u.id for u in loaded.favorites] == [author.id]
    assert loaded.dislikes == []
    assert [c.text for c in loaded.comments] == ["nice"]

    db.expunge_all()
    loaded_author = await repo.find_one(author.id, relations=("posts",))
    assert [p.title for p in loaded_author.posts] == ["hello"]


@pytest.mark.asyncio
async def test_update_returns_rowcount(repo):
    user = await repo.save(_user("a@example.com"))

    assert await repo.update(user.id, {"last_name": "Kim"}) == 1
    assert await repo.update(user.id + 100, {"last_name": "Kim"}) == 0
    assert await repo.update(user.id, {"unknown": 1}) == 0


@pytest.mark.asyncio
async def test_delete_returns_rowcount(repo):
    user = await repo.save(_user("a@example.com"))

    assert await repo.delete(user.id) == 1
    assert await repo.delete(user.id) == 0


@pytest.mark.asyncio
async def test_save_duplicate_email_propagates_integrity_error(repo, db):
    await repo.save(_user("dup@example.com"))

    with pytest.raises(IntegrityError):
        await repo.save(_user("dup@example.com"))

    # 롤백 후 세션은 계속 사용 가능
    assert await repo.find_one_by(email="dup@example.com") is not None
