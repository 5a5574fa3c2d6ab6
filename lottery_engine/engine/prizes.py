"""Prize tier tables and prize evaluation against draw history.

Floating tiers (jackpot-pool prizes) have no offline amount. They count as
wins everywhere but are left out of every monetary sum and of the maximum
prize tracking.
"""

from collections.abc import Sequence
from decimal import Decimal
from types import MappingProxyType

from loguru import logger

from lottery_engine.engine import betting
from lottery_engine.engine.exceptions import DrawNotFound, InvalidInput
from lottery_engine.engine.games import bet_counts, check_play_type, get_config
from lottery_engine.engine.selection import validate_selection
from lottery_engine.schemas.draws import DrawRecord, ParsedTicket
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.prizes import (
    MatchResult,
    PrizeAnalysisRecord,
    PrizeBreakdownItem,
    PrizeStatistics,
    PrizeTier,
    TicketCheckResponse,
    TicketCheckResult,
    TierTableRow,
)
from lottery_engine.schemas.selection import SelectionResult

NO_PRIZE = PrizeTier(name="no_prize", label="未中奖", amount=Decimal(0))


def _fixed(name: str, label: str, amount) -> PrizeTier:
    return PrizeTier(name=name, label=label, amount=Decimal(str(amount)))


def _floating(name: str, label: str) -> PrizeTier:
    return PrizeTier(name=name, label=label, amount=None, floating=True)


# (tier, [(matched_main, matched_special), ...]), best tier first
DLT_TABLE = (
    (_floating("tier1", "一等奖"), [(5, 2)]),
    (_floating("tier2", "二等奖"), [(5, 1)]),
    (_fixed("tier3", "三等奖", 10000), [(5, 0)]),
    (_fixed("tier4", "四等奖", 3000), [(4, 2)]),
    (_fixed("tier5", "五等奖", 300), [(4, 1)]),
    (_fixed("tier6", "六等奖", 200), [(3, 2), (4, 0)]),
    (_fixed("tier7", "七等奖", 100), [(3, 1), (2, 2)]),
    (_fixed("tier8", "八等奖", 15), [(3, 0), (1, 2), (2, 1), (0, 2)]),
)

SSQ_TABLE = (
    (_floating("tier1", "一等奖"), [(6, 1)]),
    (_floating("tier2", "二等奖"), [(6, 0)]),
    (_fixed("tier3", "三等奖", 3000), [(5, 1)]),
    (_fixed("tier4", "四等奖", 200), [(5, 0), (4, 1)]),
    (_fixed("tier5", "五等奖", 10), [(4, 0), (3, 1)]),
    (_fixed("tier6", "六等奖", 5), [(2, 1), (1, 1), (0, 1)]),
)

# 快乐8: play type k -> {matched: amount}; "floating" marks the jackpot tier
KL8_AMOUNTS = {
    1: {1: "4.6", 0: 2},
    2: {2: 19},
    3: {3: 53, 2: 3},
    4: {4: 100, 3: 5, 2: 3},
    5: {5: 1000, 4: 21, 3: 3},
    6: {6: 3000, 5: 30, 4: 10, 3: 3},
    7: {7: 10000, 6: 288, 5: 28, 4: 4, 0: 2},
    8: {8: 50000, 7: 800, 6: 88, 5: 10, 4: 3, 0: 2},
    9: {9: 300000, 8: 2000, 7: 200, 6: 20, 5: 5, 4: 3, 0: 2},
    10: {10: "floating", 9: 8000, 8: 800, 7: 80, 6: 5, 5: 3, 0: 2},
}


def _kl8_table(play_type: int) -> tuple:
    rows = []
    for matched, amount in KL8_AMOUNTS[play_type].items():
        name, label = f"pick{play_type}_hit{matched}", f"选{play_type}中{matched}"
        if amount == "floating":
            tier = _floating(name, label)
        else:
            tier = _fixed(name, label, amount)
        rows.append((tier, [(matched, 0)]))
    return tuple(rows)


def _index(table: tuple) -> MappingProxyType:
    return MappingProxyType({
        matches: (rank, tier)
        for rank, (tier, all_matches) in enumerate(table)
        for matches in all_matches
    })


TIER_TABLES = MappingProxyType({
    ("dlt", None): DLT_TABLE,
    ("ssq", None): SSQ_TABLE,
    **{("kl8", k): _kl8_table(k) for k in KL8_AMOUNTS},
})

_TIER_INDEX = MappingProxyType({key: _index(table) for key, table in TIER_TABLES.items()})


def _lookup(game_id: str, play_type: int | None, matched_main: int, matched_special: int):
    """Return ``(rank, tier)``; rank orders tiers best first."""
    index = _TIER_INDEX[(game_id, play_type)]
    return index.get((matched_main, matched_special), (len(index), NO_PRIZE))


def tier_for(
    game_id: str,
    matched_main: int,
    matched_special: int = 0,
    play_type: int | None = None,
) -> PrizeTier:
    """Prize tier for one single bet with the given match counts.

    Every in-range pair resolves to a tier; pairs absent from the table are
    ``NO_PRIZE``. kl8 requires ``play_type``.

    Raises:
        InvalidInput: negative counts or counts above the single-bet size.
    """
    config = get_config(game_id)
    play_type = check_play_type(config, play_type)
    main_k, special_k = bet_counts(config, play_type)
    if not 0 <= matched_main <= main_k:
        raise InvalidInput(
            f"Main matches must be between 0 and {main_k}, got {matched_main}",
            constraint="matched_main",
        )
    if not 0 <= matched_special <= special_k:
        raise InvalidInput(
            f"Special matches must be between 0 and {special_k}, got {matched_special}",
            constraint="matched_special",
        )
    return _lookup(game_id, play_type, matched_main, matched_special)[1]


def tier_table(game_id: str, play_type: int | None = None) -> list[TierTableRow]:
    """The prize table of a game, best tier first."""
    config = get_config(game_id)
    play_type = check_play_type(config, play_type)
    return [
        TierTableRow(matched_main=m, matched_special=s, tier=tier)
        for tier, all_matches in TIER_TABLES[(game_id, play_type)]
        for m, s in all_matches
    ]


def evaluate_against_draw(selection: SelectionResult, draw: DrawRecord) -> MatchResult:
    """Intersect the selection with a draw, pool by pool."""
    main_hits = sorted(set(selection.main_numbers) & draw.main_numbers)
    special_hits = sorted(set(selection.special_numbers) & draw.special_numbers)
    return MatchResult(
        matched_main=len(main_hits),
        matched_special=len(special_hits),
        matched_main_numbers=main_hits,
        matched_special_numbers=special_hits,
    )


def complex_breakdown(
    config: GameConfig,
    selection: SelectionResult,
    match: MatchResult,
    play_type: int | None = None,
) -> list[PrizeBreakdownItem]:
    """Count winning combinations of a complex bet per tier.

    A selection of ``n`` main numbers with ``h`` hits contains
    ``C(h, j) * C(n - h, k - j)`` single bets matching exactly ``j`` of the
    draw; the special pool multiplies in the same way.
    """
    play_type = check_play_type(config, play_type)
    main_k, special_k = bet_counts(config, play_type)
    main_miss = len(selection.main_numbers) - match.matched_main
    special_miss = len(selection.special_numbers) - match.matched_special

    counts: dict[tuple[int, int], int] = {}
    for j in range(main_k, -1, -1):
        main_ways = betting.combinations(match.matched_main, j) * betting.combinations(
            main_miss, main_k - j
        )
        if main_ways == 0:
            continue
        for s in range(special_k, -1, -1):
            ways = main_ways * betting.combinations(
                match.matched_special, s
            ) * betting.combinations(special_miss, special_k - s)
            if ways:
                counts[(j, s)] = ways

    items = []
    for (j, s), ways in counts.items():
        rank, tier = _lookup(config.game_id, play_type, j, s)
        if not tier.is_winning:
            continue
        amount = None if tier.floating else tier.amount * ways
        items.append((rank, -j, PrizeBreakdownItem(
            matched_main=j, matched_special=s, tier=tier, bet_count=ways, amount=amount,
        )))
    items.sort(key=lambda item: (item[0], item[1]))
    return [item for _, _, item in items]


def kl8_complex_breakdown(
    selected: Sequence[int], drawn: Sequence[int] | frozenset[int], play_type: int
) -> list[PrizeBreakdownItem]:
    """Winning kl8 combinations for ``selected`` numbers played as choose-``play_type``."""
    config = get_config("kl8")
    selection = SelectionResult(strategy="manual", main_numbers=sorted(selected))
    hits = sorted(set(selected) & set(drawn))
    match = MatchResult(
        matched_main=len(hits),
        matched_special=0,
        matched_main_numbers=hits,
        matched_special_numbers=[],
    )
    return complex_breakdown(config, selection, match, play_type)


def _is_complex(config: GameConfig, selection: SelectionResult, play_type: int | None) -> bool:
    main_k, special_k = bet_counts(config, play_type)
    return len(selection.main_numbers) > main_k or len(selection.special_numbers) > special_k


def _evaluate_draw(
    config: GameConfig,
    selection: SelectionResult,
    draw: DrawRecord,
    play_type: int | None,
) -> tuple[MatchResult, PrizeTier, Decimal | None, list[PrizeBreakdownItem]]:
    """Match one draw and price it: ``(match, best tier, amount, breakdown)``.

    A complex bet is priced as the sum of its winning fixed-amount
    combinations. ``amount`` is ``None`` when the draw wins floating tiers
    only, for simple and complex bets alike.
    """
    match = evaluate_against_draw(selection, draw)
    if not _is_complex(config, selection, play_type):
        tier = tier_for(config.game_id, match.matched_main, match.matched_special, play_type)
        return match, tier, tier.amount, []

    breakdown = complex_breakdown(config, selection, match, play_type)
    if not breakdown:
        return match, NO_PRIZE, Decimal(0), []
    fixed = [item.amount for item in breakdown if item.amount is not None]
    amount = sum(fixed, Decimal(0)) if fixed else None
    return match, breakdown[0].tier, amount, breakdown


def analyze_against_history(
    selection: SelectionResult,
    history: Sequence[DrawRecord],
    game_id: str,
    play_type: int | None = None,
) -> PrizeStatistics:
    """Evaluate a fixed selection against every draw in ``history``.

    Rules:
        - a draw is a win when any tier other than ``no_prize`` is hit,
          floating tiers included
        - floating amounts are unknown, so they are excluded from
          ``total_fixed_prize_amount`` and from the maximum
        - a record's ``amount`` is ``None`` when the draw wins floating
          tiers only; otherwise it is the fixed part of the prize
        - ``records`` are returned newest first

    Raises:
        ConfigNotFound: unknown ``game_id``.
        InvalidSelection: the selection breaks the game's rules.
    """
    config = get_config(game_id)
    play_type = check_play_type(config, play_type)
    main, special = validate_selection(
        config, selection.main_numbers, selection.special_numbers, play_type,
    )
    selection = SelectionResult(
        strategy=selection.strategy, main_numbers=main, special_numbers=special,
    )

    records: list[PrizeAnalysisRecord] = []
    winning_draws = 0
    floating_wins = 0
    fixed_wins = 0
    total_fixed = Decimal(0)
    max_fixed = Decimal(0)
    max_issue: str | None = None

    for draw in reversed(history):
        match, tier, amount, breakdown = _evaluate_draw(config, selection, draw, play_type)
        floating = tier.floating or any(item.tier.floating for item in breakdown)
        winning = tier.is_winning

        if winning:
            winning_draws += 1
        if floating:
            floating_wins += 1
        if amount:
            fixed_wins += 1
            total_fixed += amount
            if amount > max_fixed:
                max_fixed = amount
                max_issue = draw.issue_id

        records.append(PrizeAnalysisRecord(
            issue_id=draw.issue_id,
            draw_date=draw.draw_date,
            matched_main=match.matched_main,
            matched_special=match.matched_special,
            tier_name=tier.name,
            tier_label=tier.label,
            amount=amount,
            floating=floating,
            winning=winning,
            draw_main_numbers=sorted(draw.main_numbers),
            draw_special_numbers=sorted(draw.special_numbers),
            breakdown=breakdown,
        ))

    total_draws = len(records)
    bet_cost = betting.quote(config, len(main), len(special), play_type)
    total_bet_cost = bet_cost.total_cost * total_draws
    average = (total_fixed / fixed_wins).quantize(Decimal("0.01")) if fixed_wins else Decimal(0)

    logger.debug(
        "[{}] prize analysis: {}/{} winning draws, fixed total {}",
        game_id, winning_draws, total_draws, total_fixed,
    )
    return PrizeStatistics(
        game_id=game_id,
        play_type=play_type,
        total_draws=total_draws,
        winning_draws=winning_draws,
        floating_wins=floating_wins,
        winning_rate=round(winning_draws / total_draws * 100, 2) if total_draws else 0,
        total_fixed_prize_amount=total_fixed,
        max_fixed_prize_amount=max_fixed,
        max_prize_issue_id=max_issue,
        average_prize_amount=average,
        bet_cost=bet_cost,
        total_bet_cost=total_bet_cost,
        net_fixed_result=total_fixed - total_bet_cost,
        records=records,
    )


def check_ticket(
    ticket: ParsedTicket,
    history: Sequence[DrawRecord],
    game_id: str,
    play_type: int | None = None,
) -> TicketCheckResponse:
    """Check every bet line of a parsed ticket against its issue's draw."""
    config = get_config(game_id)
    play_type = check_play_type(config, play_type)

    draw = next((d for d in reversed(history) if d.issue_id == ticket.issue_id), None)
    if draw is None:
        raise DrawNotFound(ticket.issue_id)

    results = []
    for index, entry in enumerate(ticket.entries, start=1):
        main, special = validate_selection(
            config, entry.numbers, entry.special_numbers, play_type,
        )
        selection = SelectionResult(
            strategy="ticket", main_numbers=main, special_numbers=special,
        )
        match, tier, _, breakdown = _evaluate_draw(config, selection, draw, play_type)
        results.append(TicketCheckResult(
            bet_index=index,
            numbers=main,
            special_numbers=special,
            matched_main=match.matched_main,
            matched_special=match.matched_special,
            matched_main_numbers=match.matched_main_numbers,
            matched_special_numbers=match.matched_special_numbers,
            tier=tier,
            breakdown=breakdown,
        ))

    return TicketCheckResponse(
        game_id=game_id,
        issue_id=draw.issue_id,
        draw_main_numbers=sorted(draw.main_numbers),
        draw_special_numbers=sorted(draw.special_numbers),
        results=results,
        winning_entries=sum(1 for r in results if r.tier.is_winning),
    )
