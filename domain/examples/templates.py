###########################################################
# Fallback sentence templates, per category and complexity tier.
#
# Placeholders:
#   {word}  - the word as given
#   {words} - plural form (unchanged for plural and uncountable words)
#
# Templates are written for a singular countable noun: "a {word}",
# "The {word} is". The generator fixes a/an, drops articles and
# switches verb agreement for plural and uncountable words.
# Verb templates only use the base form; -ing verbs use the gerund pool.
###########################################################

TEMPLATES: dict[str, dict[str, list[str]]] = {
    "general": {
        "basic": [
            "I see a {word} here.",
            "This is a {word}.",
            "Look at the {word}.",
            "We have a {word} at home.",
            "The {word} is over there.",
        ],
        "intermediate": [
            "Can you tell me more about the {word}?",
            "I read a short story about a {word}.",
            "My teacher showed us a picture of a {word}.",
            "We talked about the {word} in class today.",
            "There are many {words} in the pictures we drew.",
        ],
        "advanced": [
            "Learning the word {word} helped me describe my day more clearly.",
            "She explained what a {word} is with a simple drawing.",
            "After a long discussion, we finally agreed on the {word}.",
        ],
    },
    "noun": {
        "basic": [
            "I have a {word}.",
            "The {word} is on the table.",
            "She found a {word} in the box.",
            "Where is the {word}?",
        ],
        "intermediate": [
            "I need a new {word} for my room.",
            "The {word} was in the kitchen this morning.",
            "He put the {word} next to the door.",
            "We bought a {word} at the store yesterday.",
            "The shop on our street sells {words}.",
        ],
        "advanced": [
            "Before leaving the house, she always checks that the {word} is in the right place.",
            "The old {word} in the corner reminds me of my grandparents.",
            "It took us a while to find a {word} that everyone liked.",
        ],
    },
    "person": {
        "basic": [
            "The {word} is my friend.",
            "I know a {word}.",
            "The {word} is very kind.",
            "She is a good {word}.",
        ],
        "intermediate": [
            "The {word} helped us with our questions.",
            "My cousin wants to become a {word}.",
            "We met a friendly {word} at the party.",
            "The {word} works hard every day.",
        ],
        "advanced": [
            "Being a {word} takes patience and a lot of practice.",
            "The {word} spoke calmly and everyone in the room listened.",
            "I admire the {word} for staying positive during a difficult year.",
        ],
    },
    "animal": {
        "basic": [
            "I see a {word}.",
            "The {word} is big.",
            "The {word} is eating.",
            "Look at that {word}!",
            "I like {words}.",
        ],
        "intermediate": [
            "We saw a {word} at the zoo.",
            "The {word} was sleeping in the sun.",
            "My sister drew a {word} in her notebook.",
            "The {word} ran across the field.",
        ],
        "advanced": [
            "Scientists study how the {word} finds food in the wild.",
            "The {word} moved quietly through the tall grass.",
            "Many children learn about the {word} from picture books.",
        ],
    },
    "clothing": {
        "basic": [
            "I wear a {word}.",
            "This {word} is blue.",
            "The {word} is new.",
            "She likes her {word}.",
        ],
        "intermediate": [
            "He bought a new {word} for the trip.",
            "This {word} is too small for me.",
            "She wore a red {word} to the party.",
            "I washed my favorite {word} yesterday.",
        ],
        "advanced": [
            "The {word} she chose matched the rest of her outfit perfectly.",
            "Because it was cold, he wore a warm {word} under his coat.",
            "This {word} has become my favorite piece of clothing this year.",
        ],
    },
    "uncountable_clothing": {
        "basic": [
            "I need new {word}.",
            "The {word} is clean.",
            "She buys {word} online.",
            "This {word} is soft.",
        ],
        "intermediate": [
            "The store sells {word} for the whole family.",
            "He packed enough {word} for the week.",
            "Good {word} makes a long walk more comfortable.",
            "She keeps her {word} in the top drawer.",
        ],
        "advanced": [
            "The shop has a large section for {word} near the entrance.",
            "Choosing the right {word} depends on the weather and the activity.",
            "More and more people now buy their {word} from local brands.",
        ],
    },
    "eyewear": {
        "basic": [
            "I wear my {word}.",
            "My {word} is new.",
            "The {word} is on the table.",
            "She has a {word}.",
        ],
        "intermediate": [
            "He cannot read without his {word}.",
            "She cleaned her {word} before the movie.",
            "My {word} is in my bag.",
            "I lost my {word} at the beach.",
        ],
        "advanced": [
            "The optician said my new {word} would help me see the board clearly.",
            "He always keeps a spare {word} in the car for long drives.",
            "Wearing the right {word} makes reading much easier for my grandmother.",
        ],
    },
    "jewelry": {
        "basic": [
            "She has a {word}.",
            "The {word} is gold.",
            "I like this {word}.",
            "The {word} is pretty.",
        ],
        "intermediate": [
            "She wore a silver {word} to the wedding.",
            "My grandmother gave me a {word} for my birthday.",
            "The {word} was in a small box.",
            "He bought a {word} for his wife.",
        ],
        "advanced": [
            "She inherited the {word} from her grandmother many years ago.",
            "He chose a simple {word} because it suited her elegant style.",
            "The jeweler carefully cleaned the {word} before giving it back.",
        ],
    },
    "tool": {
        "basic": [
            "I use a {word}.",
            "The {word} is in the box.",
            "Give me the {word}, please.",
            "This {word} is sharp.",
        ],
        "intermediate": [
            "He fixed the shelf with a {word}.",
            "The {word} is in the garage.",
            "She borrowed a {word} from her neighbor.",
            "You need a {word} for this job.",
        ],
        "advanced": [
            "With a good {word}, small repairs around the house are much easier.",
            "He always puts the {word} back in the toolbox after using it.",
            "The carpenter showed us how to hold the {word} safely.",
        ],
    },
    "toy": {
        "basic": [
            "I have a {word}.",
            "The {word} is fun.",
            "This {word} is red.",
            "She likes her {word}.",
        ],
        "intermediate": [
            "The children played with a {word} all afternoon.",
            "He got a {word} for his birthday.",
            "My little brother shares his {word} with me.",
            "The {word} was under the bed.",
        ],
        "advanced": [
            "He still keeps the {word} he received as a child on his shelf.",
            "She carefully wrapped the {word} as a present for her niece.",
            "Every evening, the little girl puts her {word} next to her pillow.",
        ],
    },
    "verb": {
        "basic": [
            "I {word} every day.",
            "We {word} together.",
            "They like to {word}.",
            "Can you {word}?",
        ],
        "intermediate": [
            "I want to {word} after school.",
            "She tries to {word} every morning.",
            "We will {word} at the weekend.",
            "Do you know how to {word}?",
        ],
        "advanced": [
            "If you practice often, you will learn to {word} much better.",
            "He decided to {word} more often to feel healthier.",
            "It is important to {word} carefully when you are tired.",
        ],
    },
    "adjective": {
        "basic": [
            "It is {word}.",
            "The room is {word}.",
            "She looks {word}.",
            "The day is {word}.",
        ],
        "intermediate": [
            "The weather was {word} all week.",
            "He felt {word} after the long walk.",
            "Our new house is very {word}.",
            "The test was more {word} than I expected.",
        ],
        "advanced": [
            "Although the task seemed {word}, we finished it on time.",
            "The city feels especially {word} in the early morning.",
            "Her answer was {word}, but everyone understood what she meant.",
        ],
    },
    "gerund": {
        "basic": [
            "I like {word}.",
            "{word} is fun.",
            "We love {word}.",
        ],
        "intermediate": [
            "My brother started {word} last summer.",
            "{word} is good for your health.",
            "She enjoys {word} with her friends.",
        ],
        "advanced": [
            "After a stressful week, {word} helps me relax and clear my head.",
            "He became interested in {word} when he was still at school.",
        ],
    },
}
