"""
Skill definitions for agents built on the memory layer.

A skill is a named capability that takes a text input and produces a text
output. The registry is a keyed lookup; it also renders function-tool
schemas so an LLM can pick skills by name.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .errors import InvalidInputError
from .memory import MemoryManager

logger = logging.getLogger("semantic_memory.skills")


class Skill(ABC):
    """Abstract interface for a named capability."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name used for lookup."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """What the skill does, in a sentence."""
        pass

    @abstractmethod
    async def execute(self, input: str) -> str:
        """Run the skill on the given input."""
        pass


class SkillRegistry:
    """
    Registry of skills available to an agent.
    """

    def __init__(self):
        self._skills: dict[str, Skill] = {}

    def register(self, skill: Skill) -> None:
        """
        Register a skill under its name.

        Registering a second skill with the same name replaces the first.
        """
        if skill is None:
            raise InvalidInputError("Skill cannot be null.")
        if not skill.name or not skill.name.strip():
            raise InvalidInputError("Skill name cannot be null or empty.")

        if skill.name in self._skills:
            logger.warning(f"Replacing registered skill: {skill.name}")
        self._skills[skill.name] = skill
        logger.debug(f"Registered skill: {skill.name}")

    def get(self, name: str) -> Optional[Skill]:
        """Look up a skill by name."""
        return self._skills.get(name)

    def get_definitions(self) -> list[dict[str, Any]]:
        """
        Get the JSON schema definitions for all registered skills.
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": skill.name,
                    "description": skill.description,
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "input": {
                                "type": "string",
                                "description": "Text input for the skill."
                            }
                        },
                        "required": ["input"]
                    }
                }
            }
            for skill in self._skills.values()
        ]

    async def execute(self, name: str, input: str) -> str:
        """
        Execute a skill by name.

        Failures are reported back as text so an agent loop can keep going.
        """
        logger.info(f"Executing skill: {name}")

        skill = self.get(name)
        if skill is None:
            return f"Skill {name} not found."

        try:
            return await skill.execute(input)
        except Exception as e:
            logger.error(f"Error executing skill {name}: {e}")
            return f"Error executing skill: {e}"

    # Defined last: the method name shadows the builtin inside the class body
    def list(self) -> list[Skill]:
        """All registered skills, in registration order."""
        return list(self._skills.values())


class MemorySearchSkill(Skill):
    """Searches stored memories for text similar to the input."""

    def __init__(self, memory: MemoryManager, limit: int = 3, min_similarity: float = 0.0):
        self.memory = memory
        self.limit = limit
        self.min_similarity = min_similarity

    @property
    def name(self) -> str:
        return "search_memory"

    @property
    def description(self) -> str:
        return "Search stored memories for text similar in meaning to the input."

    async def execute(self, input: str) -> str:
        results = await self.memory.recall(
            input,
            limit=self.limit,
            min_similarity=self.min_similarity,
        )
        if not results:
            return "No matching memories found."

        lines = [f"Memories matching '{input}':", ""]
        for result in results:
            lines.append(f"- [{result.record_id}] {result.text} (similarity {result.similarity:.1%})")
        return "\n".join(lines)
