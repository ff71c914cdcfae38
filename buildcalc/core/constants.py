"""League of Legends build calculator constants."""

from typing import Final

# =============================================================================
# LEVELS
# =============================================================================
MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 18

# Stat growth curve: bonus = growth * (level - 1) * (0.7025 + 0.0175 * (level - 1))
GROWTH_BASE: Final[float] = 0.7025
GROWTH_RAMP: Final[float] = 0.0175

# =============================================================================
# BUILD LIMITS
# =============================================================================
MAX_ITEMS: Final[int] = 6

# =============================================================================
# BASE STAT DEFAULTS
# =============================================================================
DEFAULT_ATTACK_SPEED: Final[float] = 0.625  # Used when a champion has no attack speed
BASE_CRIT_DAMAGE: Final[float] = 175.0      # Percent

# =============================================================================
# PENETRATION
# =============================================================================
# Lethality converts to flat armor pen at 0.6 + 0.4 * target_level / 18
LETHALITY_BASE_RATIO: Final[float] = 0.6
LETHALITY_LEVEL_RATIO: Final[float] = 0.4

RESISTANCE_CONSTANT: Final[float] = 100.0

# =============================================================================
# CANONICAL STATS
# =============================================================================
CANONICAL_STATS: Final[tuple[str, ...]] = (
    "health",
    "health_per_level",
    "mana",
    "mana_per_level",
    "armor",
    "armor_per_level",
    "magic_resist",
    "magic_resist_per_level",
    "attack_damage",
    "attack_damage_per_level",
    "attack_speed",
    "attack_speed_per_level",
    "crit_chance",
    "crit_chance_per_level",
    "health_regen",
    "health_regen_per_level",
    "mana_regen",
    "mana_regen_per_level",
    "movement_speed",
    "attack_range",
    "ability_power",
    "ability_haste",
    "crit_damage",
    "lethality",
    "armor_penetration_percent",
    "magic_penetration_flat",
    "magic_penetration_percent",
    "life_steal",
    "omnivamp",
    "heal_and_shield_power",
)

# Stats that have a *_per_level growth coefficient on the champion record
GROWTH_STATS: Final[tuple[str, ...]] = (
    "health",
    "mana",
    "armor",
    "magic_resist",
    "attack_damage",
    "crit_chance",
    "health_regen",
    "mana_regen",
)

PERCENT_SUFFIX: Final[str] = "_percent"
UNMAPPED_PREFIX: Final[str] = "_unmapped_"

# =============================================================================
# VENDOR STAT KEYS (Data Dragon item / rune modifiers)
# =============================================================================
VENDOR_STAT_MAPPINGS: Final[dict[str, str]] = {
    # Flat
    "FlatPhysicalDamageMod": "attack_damage",
    "FlatMagicDamageMod": "ability_power",
    "FlatArmorMod": "armor",
    "FlatSpellBlockMod": "magic_resist",
    "FlatHPPoolMod": "health",
    "FlatMPPoolMod": "mana",
    "FlatHPRegenMod": "health_regen",
    "FlatMPRegenMod": "mana_regen",
    "FlatMovementSpeedMod": "movement_speed",
    "FlatEnergyPoolMod": "energy",
    "FlatEnergyRegenMod": "energy_regen",
    # Percent modifiers
    "PercentPhysicalDamageMod": "attack_damage_percent",
    "PercentMagicDamageMod": "ability_power_percent",
    "PercentHPPoolMod": "health_percent",
    "PercentMPPoolMod": "mana_percent",
    "PercentMovementSpeedMod": "movement_speed_percent",
    "PercentAttackSpeedMod": "attack_speed",  # Always a ratio bonus
    "PercentArmorMod": "armor_percent",
    "PercentSpellBlockMod": "magic_resist_percent",
    "PercentHPRegenMod": "health_regen_percent",
    "PercentMPRegenMod": "mana_regen_percent",
    # Critical strike
    "FlatCritChanceMod": "crit_chance",
    "FlatCritDamageMod": "crit_damage",
    "PercentCritDamageMod": "crit_damage_percent",
    # Penetration
    "FlatArmorPenetrationMod": "lethality",
    "rFlatArmorPenetrationMod": "lethality",
    "PercentArmorPenetrationMod": "armor_penetration_percent",
    "rPercentArmorPenetrationMod": "armor_penetration_percent",
    "FlatMagicPenetrationMod": "magic_penetration_flat",
    "rFlatMagicPenetrationMod": "magic_penetration_flat",
    "PercentMagicPenetrationMod": "magic_penetration_percent",
    "rPercentMagicPenetrationMod": "magic_penetration_percent",
    # Sustain
    "PercentLifeStealMod": "life_steal",
    "PercentOmnivampMod": "omnivamp",
    "PercentSpellVampMod": "spell_vamp",
    "PercentHealAndShieldPowerMod": "heal_and_shield_power",
    # Haste
    "FlatAbilityHasteMod": "ability_haste",
    "rPercentCooldownMod": "cooldown_reduction",
    "rPercentCooldownModPerLevel": "cooldown_reduction_per_level",
    # Attack speed
    "FlatAttackSpeedMod": "attack_speed_flat",
    "rPercentAttackSpeedModPerLevel": "attack_speed_per_level",
    # Gold / experience
    "rFlatGoldPer10Mod": "gold_per_10",
    "FlatEXPBonus": "experience_flat",
    "PercentEXPBonus": "experience_percent",
    # Per level (legacy runes)
    "rFlatPhysicalDamageModPerLevel": "attack_damage_per_level",
    "rFlatMagicDamageModPerLevel": "ability_power_per_level",
    "rFlatArmorModPerLevel": "armor_per_level",
    "rFlatSpellBlockModPerLevel": "magic_resist_per_level",
    "rFlatHPModPerLevel": "health_per_level",
    "rFlatMPModPerLevel": "mana_per_level",
    "rFlatHPRegenModPerLevel": "health_regen_per_level",
    "rFlatMPRegenModPerLevel": "mana_regen_per_level",
    "rFlatMovementSpeedModPerLevel": "movement_speed_per_level",
    # Legacy specials
    "FlatBlockMod": "block",
    "PercentBlockMod": "block_percent",
    "FlatDodgeMod": "dodge",
    "PercentDodgeMod": "dodge_percent",
    "rFlatTimeDeadMod": "time_dead_reduction",
    "rPercentTimeDeadMod": "time_dead_reduction_percent",
}

# Vendor keys containing any of these are fractions (0.15) rescaled to percent units (15)
RESCALE_MARKERS: Final[tuple[str, ...]] = ("Percent", "Crit")

# Data Dragon champion stat block -> canonical
CHAMPION_STAT_MAPPINGS: Final[dict[str, str]] = {
    "hp": "health",
    "hpperlevel": "health_per_level",
    "mp": "mana",
    "mpperlevel": "mana_per_level",
    "movespeed": "movement_speed",
    "armor": "armor",
    "armorperlevel": "armor_per_level",
    "spellblock": "magic_resist",
    "spellblockperlevel": "magic_resist_per_level",
    "attackrange": "attack_range",
    "hpregen": "health_regen",
    "hpregenperlevel": "health_regen_per_level",
    "mpregen": "mana_regen",
    "mpregenperlevel": "mana_regen_per_level",
    "crit": "crit_chance",
    "critperlevel": "crit_chance_per_level",
    "attackdamage": "attack_damage",
    "attackdamageperlevel": "attack_damage_per_level",
    "attackspeed": "attack_speed",
    "attackspeedperlevel": "attack_speed_per_level",
}

REQUIRED_STATS: Final[tuple[str, ...]] = (
    "health",
    "mana",
    "attack_damage",
    "ability_power",
    "armor",
    "magic_resist",
    "attack_speed",
    "movement_speed",
)

# =============================================================================
# ITEMS
# =============================================================================
# Applied by the attack speed formula instead of the flat item fold
MULTIPLICATIVE_ITEM_STATS: Final[tuple[str, ...]] = ("attack_speed",)

# Named item passives -> flat stat overrides
ITEM_PASSIVE_EFFECTS: Final[dict[str, dict[str, float]]] = {
    "Perfection": {"crit_damage": 35.0},  # Infinity Edge
}

# Gold value of one point of each stat (percent stats are per 1%)
STAT_GOLD_VALUES: Final[dict[str, float]] = {
    "attack_damage": 35.0,
    "ability_power": 20.0,
    "attack_speed": 25.0,
    "crit_chance": 40.0,
    "health": 2.67,
    "armor": 20.0,
    "magic_resist": 18.0,
    "movement_speed": 12.0,
    "ability_haste": 26.67,
    "lethality": 50.0,
    "life_steal": 37.5,
    "omnivamp": 27.5,
}

# =============================================================================
# STAT SHARDS
# =============================================================================
ADAPTIVE_AD: Final[float] = 5.4
ADAPTIVE_AP: Final[float] = 9.0
SHARD_ATTACK_SPEED_MULTIPLIER: Final[float] = 1.10
SHARD_ABILITY_HASTE: Final[float] = 8.0
SHARD_MOVEMENT_SPEED: Final[float] = 2.0
SHARD_HEALTH_BASE: Final[float] = 15.0
SHARD_HEALTH_MAX_BONUS: Final[float] = 140.0  # Reached at level 18
SHARD_HEALTH_SCALING_PER_LEVEL: Final[float] = 10.0
SHARD_ARMOR: Final[float] = 6.0
SHARD_MAGIC_RESIST: Final[float] = 8.0

# =============================================================================
# OBJECTIVE BUFFS
# =============================================================================
BARON_BONUS: Final[dict[str, float]] = {
    "attack_damage": 25.0,
    "ability_power": 40.0,
}

DRAGON_BONUS_PER_STACK: Final[dict[str, float]] = {
    "attack_damage": 4.0,
    "ability_power": 6.0,
    "armor": 3.0,
    "magic_resist": 3.0,
}


def clamp_level(level: int) -> int:
    """Clamp a champion level into [MIN_LEVEL, MAX_LEVEL]."""
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))
