"""Simulates a whole game between bot players."""

import random

from wizard.bots.base_bot import BaseBot
from wizard.bots.random_bot import RandomBot
from wizard.bots.rule_based_bot import RuleBasedBot
from wizard.config import settings
from wizard.models.enums import GameState
from wizard.models.game import Game
from wizard.models.player import Player

BOT_TYPES: dict[str, type[BaseBot]] = {
    "random": RandomBot,
    "rule_based": RuleBasedBot,
}


class BotGameSimulator:
    """Simulates a game between bot players."""

    def __init__(
        self,
        num_players: int = 4,
        bot_types: list[str] | None = None,
        seed: int | None = None,
        max_rounds: int | None = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            num_players: Number of players
            bot_types: Bot type for each player ("random" or "rule_based")
            seed: Seed for shuffling and bot choices
            max_rounds: Stop after this many rounds (default: full game)

        Raises:
            ValueError: If the table cannot seat ``num_players``
        """
        self.rng = random.Random(seed)  # noqa: S311
        self.game = Game(rng=self.rng)
        if not (self.game.min_players <= num_players <= self.game.max_players):
            msg = f"Must have {self.game.min_players}-{self.game.max_players} players"
            raise ValueError(msg)

        self.num_players = num_players
        self.bot_types = bot_types or [settings.default_bot_strategy] * num_players
        self.max_rounds = max_rounds
        self.bots: dict[str, BaseBot] = {}

    def setup_game(self) -> None:
        """Seat the bot players.

        Raises:
            ValueError: If the game refuses a seat
        """
        for i in range(self.num_players):
            name = f"Bot{i + 1}"
            bot_type = self.bot_types[i] if i < len(self.bot_types) else "random"
            if not self.game.add_player(Player(name=name, is_bot=True)):
                msg = f"Game refused to seat {name}"
                raise ValueError(msg)

            self.bots[name] = BOT_TYPES.get(bot_type, RandomBot)(name, self.rng)
            print(f"  Player {i + 1}: {name} ({bot_type})")

    def play_round(self) -> None:
        """Play a single round."""
        current_round = self.game.start_new_round(reveal=True)
        trump = current_round.trump.display_name if current_round.trump else "none"
        print(f"\nROUND {current_round.number} (trump: {trump})")
        print("-" * 40)

        for seat, player in enumerate(self.game.players):
            options = Game.bid_options(
                current_round.number,
                current_round.total_bids(),
                is_last=seat == len(self.game.players) - 1,
            )
            bid = self.bots[player.name].make_bid(self.game, options, player.hand)
            self.game.place_bid(player, bid)

        for _ in range(current_round.number):
            self.play_trick()

        for player in self.game.players:
            result = "hit" if player.bid_correct() else "miss"
            print(f"  {player.name}: Bid {player.bid}, Won {player.tricks_won} ({result})")

    def play_trick(self) -> None:
        """Play a single trick in seating order."""
        plays = []
        for player in list(self.game.players):
            cards_in_trick = [card for card, _ in plays]
            card = self.bots[player.name].pick_card(self.game, player.hand, cards_in_trick)
            plays.append((card, player))

        winner = self.game.play_trick(plays)
        shown = ", ".join(f"{p.name}: {card}" for card, p in plays)
        print(f"    {shown} -> {winner.name}")

    def play_game(self) -> None:
        """Play a complete game, seating the bots first if needed."""
        if not self.bots:
            self.setup_game()
        rounds = self.game.round_limit()
        if self.max_rounds is not None:
            rounds = min(rounds, self.max_rounds)

        for _ in range(rounds):
            self.play_round()

        self.game.state = GameState.ENDED
        print("\nTRICKS WON:")
        for rank, entry in enumerate(self.game.get_leaderboard(), 1):
            print(f"  {rank}. {entry['name']}: {entry['tricks']}")
