# src/timetable_companion/schedule/quotes.py

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum


class QuoteKind(StrEnum):
    MOTIVATION = "motivation"
    ROAST = "roast"


@dataclass(frozen=True, slots=True)
class Quote:
    bengali: str
    translation: str
    kind: QuoteKind


QUOTES: dict[QuoteKind, tuple[tuple[str, str], ...]] = {
    QuoteKind.MOTIVATION: (
        ("চলতে থাকো, তুমি পারবে!", "Keep going, you can do it!"),
        ("প্রতিটি পদক্ষেপ তোমাকে লক্ষ্যের কাছে নিয়ে যাচ্ছে", "Every step brings you closer to your goal"),
        ("হাল ছেড়ো না, সফলতা খুব কাছে", "Don't give up, success is near"),
        ("তোমার পরিশ্রম কখনো বৃথা যাবে না", "Your hard work will never go to waste"),
        ("বিশ্বাস রাখো নিজের উপর", "Believe in yourself"),
        ("আজকের কষ্ট, কালের সাফল্য", "Today's struggle, tomorrow's success"),
        ("তুমি যা ভাবছো তার চেয়ে শক্তিশালী", "You're stronger than you think"),
        ("স্বপ্ন দেখো বড়, পরিশ্রম করো বেশি", "Dream big, work harder"),
        ("প্রতিটি মুহূর্ত গুরুত্বপূর্ণ, নষ্ট করো না", "Every moment matters, don't waste it"),
        ("তোমার লক্ষ্য তোমার শক্তি", "Your goal is your strength"),
    ),
    QuoteKind.ROAST: (
        ("পড়াশোনা করো, ফোন ছাড়ো!", "Study more, leave the phone!"),
        ("এভাবে চললে JEE তো দূরের কথা!", "At this rate, forget JEE!"),
        ("ঘুম কম, পড়া বেশি - এটাই নিয়ম", "Less sleep, more study - that's the rule"),
        ("সোশ্যাল মিডিয়া বন্ধ করো, বই খোলো", "Close social media, open books"),
        ("সময় নষ্ট করছো নাকি পড়া করছো?", "Wasting time or studying?"),
        ("এত আলস্য নিয়ে সফল হবে কীভাবে?", "How will you succeed being so lazy?"),
        ("ব্রেক শেষ, এবার পড়তে বসো", "Break's over, time to study"),
        ("মনোযোগ দাও, বিভ্রান্ত হয়ো না", "Focus, don't get distracted"),
        ("পরীক্ষা কাছে, তুমি কোথায়?", "Exam's near, where are you?"),
        ("গল্প কম, পড়াশোনা বেশি করো", "Less chatting, more studying"),
    ),
}


def random_quote(kind: QuoteKind | None = None, rng: random.Random | None = None) -> Quote:
    """Pick a quote; the kind is a coin flip unless given."""
    rng = rng or random.Random()
    if kind is None:
        kind = QuoteKind.MOTIVATION if rng.random() > 0.5 else QuoteKind.ROAST
    bengali, translation = rng.choice(QUOTES[kind])
    return Quote(bengali=bengali, translation=translation, kind=kind)
