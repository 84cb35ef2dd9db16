import pytest

from toybox.concurrency import (
    async_fn,
    example_four,
    example_one,
    example_three,
    example_two,
    main,
    one,
    select_example,
    select_example_two,
    two,
)


@pytest.mark.asyncio
async def test_async_fn_prints_and_returns(capsys):
    assert await async_fn(7) == 7
    assert capsys.readouterr().out == "7 "


@pytest.mark.asyncio
async def test_one_and_two(capsys):
    await one()
    await two()
    assert capsys.readouterr().out == "one...\ntwo...\n"


@pytest.mark.asyncio
async def test_example_one_order(capsys):
    await example_one()
    assert capsys.readouterr().out == "one...\ntwo...\n"


@pytest.mark.asyncio
async def test_example_two_runs_every_task(capsys):
    results = await example_two()
    assert results == list(range(1001))
    out = capsys.readouterr().out
    assert out.endswith("\n")
    assert sorted(int(token) for token in out.split()) == results


@pytest.mark.asyncio
async def test_example_three_runs_every_task(capsys):
    results = await example_three()
    assert results == list(range(1000))
    out = capsys.readouterr().out
    assert sorted(int(token) for token in out.split()) == results


@pytest.mark.asyncio
async def test_example_four(capsys):
    assert await example_four() == [0, 1]
    assert sorted(capsys.readouterr().out.split()) == ["0", "1"]


@pytest.mark.asyncio
async def test_select_example_reports_winner(capsys):
    winner = await select_example()
    assert winner in (1, 2)
    assert f"async_fn {winner} completed first\n" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_select_example_two_waits_for_both(capsys):
    order = await select_example_two()
    assert sorted(order) == [1, 2]
    out = capsys.readouterr().out
    assert out.count("completed first") == 2


def test_main_prints_all_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("** Example 1: use await to evaluate futures\none...\ntwo...\n")
    assert "SELECT\n" in out
    assert out.count("completed first") == 3