"""테마별 발견물 어휘 (이름 / 학명 / 설명 / 재미있는 사실)"""

from dataclasses import dataclass

from adventure_deck.core.themes import Theme


@dataclass(frozen=True)
class DiscoveryVocabulary:
    names: tuple[str, ...] = ()
    species: tuple[str, ...] = ()
    descriptions: tuple[str, ...] = ()
    fun_facts: tuple[str, ...] = ()


THEME_VOCABULARY: dict[Theme, DiscoveryVocabulary] = {
    Theme.SPACE: DiscoveryVocabulary(
        names=(
            "Glimmer Star", "Nova Crystal", "Cosmic Pebble", "Star Dust",
            "Moon Rock", "Nebula Wisp", "Asteroid Chunk", "Quantum Sparkle",
            "Stellar Fragment", "Galaxy Gem", "Comet Tail", "Plasma Orb",
            "Void Crystal", "Pulsar Beacon", "Solar Flare Shard",
        ),
        species=(
            "Crystallus Cosmicus", "Stellaris Luminosa", "Nebulae Fragmentum",
            "Astrum Mirabilis", "Voidwalker Particle", "Quantum Floater",
        ),
        descriptions=(
            "Floats gently through the cosmos.",
            "Sparkles with ancient starlight.",
            "Contains traces of distant galaxies.",
            "Hums with cosmic energy.",
            "Formed in a supernova explosion.",
            "Drifts between dimensions.",
        ),
        fun_facts=(
            "Can be seen from 3 galaxies away!",
            "Astronauts use these for good luck.",
            "Makes a tiny 'boop' sound in space.",
            "Aliens think these are very pretty.",
            "Older than most planets!",
            "Tastes like stardust (don't eat it though).",
        ),
    ),
    Theme.OCEAN: DiscoveryVocabulary(
        names=(
            "Bubble Pearl", "Sea Sparkle", "Coral Gem", "Tide Crystal",
            "Ocean Star", "Wave Whisper", "Kelp Jewel", "Sand Dollar",
            "Mermaid Tear", "Nautilus Shell", "Deep Blue", "Foam Flower",
            "Current Stone", "Reef Rainbow", "Abyss Glow",
        ),
        species=(
            "Aquaticus Brilliantus", "Corallus Geminus", "Pelagicus Mysterium",
            "Tidalis Sparklia", "Abyssus Glowfish", "Marinara Crystalli",
        ),
        descriptions=(
            "Glows softly in deep water.",
            "Carried by gentle currents.",
            "Home to tiny sea creatures.",
            "Reflects beautiful colors.",
            "Smooth from ocean waves.",
            "Whispers secrets of the deep.",
        ),
        fun_facts=(
            "Fish love to play with these!",
            "Dolphins collect them for fun.",
            "Glows brighter when you're happy.",
            "Mermaids use these as decorations.",
            "Can hold its breath forever!",
            "Makes bubbles when it's excited.",
        ),
    ),
    Theme.CITY: DiscoveryVocabulary(
        names=(
            "Metro Gem", "Street Light", "Urban Crystal", "Neon Spark",
            "Tower Top", "Park Treasure", "City Star", "Bridge Token",
            "Window Glow", "Rooftop Find", "Sidewalk Gem", "Traffic Light",
            "Billboard Bit", "Fountain Coin", "Alley Discovery",
        ),
        species=(
            "Urbanus Glitterus", "Metropolitus Shineus", "Neonus Brighticus",
            "Civitas Treasurium", "Streetwise Sparklius", "Downtown Gemicus",
        ),
        descriptions=(
            "Reflects the city lights.",
            "Found in a hidden corner.",
            "Sparkles after the rain.",
            "Hums with urban energy.",
            "Loved by city explorers.",
            "Glows brightest at night.",
        ),
        fun_facts=(
            "Pigeons think it's very shiny.",
            "Appears after thunderstorms.",
            "Street cats guard these carefully.",
            "Taxi drivers consider it lucky.",
            "Glows near pizza shops.",
            "Hums along to city music.",
        ),
    ),
    Theme.WESTERN: DiscoveryVocabulary(
        names=(
            "Desert Gold", "Canyon Crystal", "Prairie Star", "Sunset Gem",
            "Tumbleweed Jewel", "Cactus Crown", "Mesa Stone", "Dust Devil",
            "Frontier Find", "Trail Marker", "Outlaw's Luck", "Sheriff Star",
            "Horseshoe Charm", "Wagon Wheel", "Campfire Ember",
        ),
        species=(
            "Desertum Goldicus", "Prairius Gemstone", "Canyonus Crystalum",
            "Frontierus Luckius", "Wildwestus Treasurium", "Sunseticus Glow",
        ),
        descriptions=(
            "Warmed by the desert sun.",
            "Tumbled smooth by sand.",
            "Glows at sunset.",
            "Treasured by pioneers.",
            "Found on dusty trails.",
            "Sparkles like a campfire.",
        ),
        fun_facts=(
            "Cowboys put these in their hats!",
            "Horses can smell these from far away.",
            "Coyotes howl when they find one.",
            "Gets shinier in the moonlight.",
            "Tumbleweeds carry these across the desert.",
            "Makes a tiny 'yeehaw' when discovered.",
        ),
    ),
}


def vocabulary_for(theme: Theme) -> DiscoveryVocabulary:
    return THEME_VOCABULARY.get(theme, DiscoveryVocabulary())
