"""
콘테스트 등록/수정/조회 테스트 (메모리, SQL 구현체 공통)
"""
import pytest

from virtual_contest.core.exceptions import NotFound


@pytest.mark.asyncio
async def test_create_and_get_single_contest_info(manager, contest_kwargs):
    """생성한 콘테스트를 그대로 조회"""
    contest_id = await manager.create_contest(**contest_kwargs)

    info = await manager.get_single_contest_info(contest_id)
    assert info.id == contest_id
    assert info.title == "ABC 복습"
    assert info.memo == "memo"
    assert info.owner_user_id == "owner"
    assert info.start_epoch_second == 1000
    assert info.duration_second == 500
    assert info.mode is None
    assert info.is_public is True
    assert info.penalty_second == 300
    assert info.end_epoch_second == 1500


@pytest.mark.asyncio
async def test_create_contest_returns_fresh_ids(manager, contest_kwargs):
    """같은 제목으로 여러 번 생성해도 매번 새 ID 발급"""
    ids = [await manager.create_contest(**contest_kwargs) for _ in range(5)]
    assert len(set(ids)) == 5

    own = await manager.get_own_contests("owner")
    assert sorted(contest.id for contest in own) == sorted(ids)


@pytest.mark.asyncio
async def test_get_single_contest_info_not_found(manager):
    with pytest.raises(NotFound):
        await manager.get_single_contest_info("no-such-contest")


@pytest.mark.asyncio
async def test_update_contest_overwrites_mutable_fields(manager, contest_kwargs):
    """id, 소유자를 제외한 필드 전체 덮어쓰기"""
    contest_id = await manager.create_contest(**contest_kwargs)

    await manager.update_contest(
        contest_id,
        title="new title",
        memo="new memo",
        start_epoch_second=2000,
        duration_second=60,
        mode="lockout",
        is_public=False,
        penalty_second=0,
    )

    info = await manager.get_single_contest_info(contest_id)
    assert info.id == contest_id
    assert info.owner_user_id == "owner"
    assert info.title == "new title"
    assert info.memo == "new memo"
    assert info.start_epoch_second == 2000
    assert info.duration_second == 60
    assert info.mode == "lockout"
    assert info.is_public is False
    assert info.penalty_second == 0


@pytest.mark.asyncio
async def test_update_contest_unknown_id_is_silent(manager, contest_kwargs):
    """존재하지 않는 ID 수정은 예외 없이 무시"""
    contest_id = await manager.create_contest(**contest_kwargs)

    await manager.update_contest(
        "no-such-contest",
        title="x",
        memo="x",
        start_epoch_second=0,
        duration_second=0,
        mode=None,
        is_public=True,
        penalty_second=0,
    )

    info = await manager.get_single_contest_info(contest_id)
    assert info.title == "ABC 복습"


@pytest.mark.asyncio
async def test_get_own_contests_filters_by_owner(manager, contest_kwargs):
    mine = await manager.create_contest(**contest_kwargs)
    await manager.create_contest(**{**contest_kwargs, "owner_user_id": "someone"})

    own = await manager.get_own_contests("owner")
    assert [contest.id for contest in own] == [mine]
    assert await manager.get_own_contests("nobody") == []


@pytest.mark.asyncio
async def test_get_participated_contests(manager, add_user, contest_kwargs):
    """참가한 콘테스트만 조회"""
    await add_user("alice", "alice_handle")
    joined = await manager.create_contest(**contest_kwargs)
    await manager.create_contest(**contest_kwargs)

    await manager.join_contest(joined, "alice")

    contests = await manager.get_participated_contests("alice")
    assert [contest.id for contest in contests] == [joined]
    assert await manager.get_participated_contests("bob") == []


@pytest.mark.asyncio
async def test_get_recent_contest_info_public_only_ordered_by_end(manager, contest_kwargs):
    """비공개 제외, 종료 시각 내림차순"""
    early = await manager.create_contest(
        **{**contest_kwargs, "start_epoch_second": 100, "duration_second": 100}
    )
    late = await manager.create_contest(
        **{**contest_kwargs, "start_epoch_second": 50, "duration_second": 1000}
    )
    middle = await manager.create_contest(
        **{**contest_kwargs, "start_epoch_second": 500, "duration_second": 10}
    )
    await manager.create_contest(
        **{**contest_kwargs, "start_epoch_second": 9999, "is_public": False}
    )

    recent = await manager.get_recent_contest_info()
    assert [contest.id for contest in recent] == [late, middle, early]
