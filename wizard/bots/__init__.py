"""Bot players for Wizard.

Available bots:
- RandomBot: Plays random cards, following the forced color when it can
- RuleBasedBot: Bids from hand strength and plays to meet its bid
- BotGameSimulator: Seats bots and plays a whole game
"""

from wizard.bots.base_bot import BaseBot
from wizard.bots.random_bot import RandomBot
from wizard.bots.rule_based_bot import RuleBasedBot
from wizard.bots.simulator import BotGameSimulator

__all__ = ["BaseBot", "BotGameSimulator", "RandomBot", "RuleBasedBot"]
