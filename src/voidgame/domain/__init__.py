"""Pure battle model: stats, formulas, status effects and combatants."""
