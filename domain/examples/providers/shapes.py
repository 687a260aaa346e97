# Response shapes of the example providers. Unknown fields are ignored.
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel

# ---------- Oxford Dictionaries: /entries/en-gb/{word} ----------


class OxfordExample(BaseModel):
    text: Optional[str] = None


class OxfordSense(BaseModel):
    examples: List[OxfordExample] = Field(default_factory=list)
    subsenses: List["OxfordSense"] = Field(default_factory=list)


class OxfordEntry(BaseModel):
    senses: List[OxfordSense] = Field(default_factory=list)


class OxfordLexicalEntry(BaseModel):
    entries: List[OxfordEntry] = Field(default_factory=list)


class OxfordResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lexical_entries: List[OxfordLexicalEntry] = Field(
        default_factory=list, alias="lexicalEntries"
    )


class OxfordResponse(BaseModel):
    results: List[OxfordResult] = Field(default_factory=list)


# ---------- WordsAPI: /words/{word}/examples ----------


class WordsApiResponse(BaseModel):
    examples: List[str] = Field(default_factory=list)


# ---------- Tatoeba: /api_v0/search ----------


class TatoebaSentence(BaseModel):
    text: Optional[str] = None
    lang: Optional[str] = None


class TatoebaResponse(BaseModel):
    results: List[TatoebaSentence] = Field(default_factory=list)


# ---------- Free Dictionary: /entries/en/{word} ----------


class FreeDictionaryDefinition(BaseModel):
    example: Optional[str] = None


class FreeDictionaryMeaning(BaseModel):
    definitions: List[FreeDictionaryDefinition] = Field(default_factory=list)


class FreeDictionaryEntry(BaseModel):
    meanings: List[FreeDictionaryMeaning] = Field(default_factory=list)


class FreeDictionaryResponse(RootModel[List[FreeDictionaryEntry]]):
    pass


# ---------- Wordnik: /word.json/{word}/examples ----------


class WordnikExample(BaseModel):
    text: Optional[str] = None


class WordnikResponse(BaseModel):
    examples: List[WordnikExample] = Field(default_factory=list)
