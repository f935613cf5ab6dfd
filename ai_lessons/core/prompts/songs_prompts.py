"""
Structured output lesson prompts.

Each template has an {artist} slot and a {format} slot that receives the
format instructions of the parser used on the reply.

Dependencies: langchain_core.prompts
System role: Prompts for the list, mapping and record parsing lesson
"""

from langchain_core.prompts import PromptTemplate

SONGS_LIST_PROMPT = PromptTemplate.from_template(
    """Provide a list of the top 10 songs by the artist {artist}.
{format}"""
)

SONGS_MAP_PROMPT = PromptTemplate.from_template(
    """Provide the top 10 songs by the artist {artist} as a mapping from song title to release year.
{format}"""
)

SONGS_RECORD_PROMPT = PromptTemplate.from_template(
    """Provide the artist name and the titles of the top 10 songs by the artist {artist}.
{format}"""
)
