"""Named ARGB colours whose names begin with the letters A to L."""

from __future__ import annotations

_COLORS_A_TO_L: dict[str, int] = {
    "AIR_FORCE_BLUE": 0xFF5D8AA8,
    "ALICE_BLUE": 0xFFF0F8FF,
    "ALIZARIN_CRIMSON": 0xFFE32636,
    "ALMOND": 0xFFEFDECD,
    "AMARANTH": 0xFFE52B50,
    "AMBER": 0xFFFFBF00,
    "AMERICAN_ROSE": 0xFFFF033E,
    "AMETHYST": 0xFF9966CC,
    "ANDROID_GREEN": 0xFFA4C639,
    "ANTI_FLASH_WHITE": 0xFFF2F3F4,
    "ANTIQUE_BRASS": 0xFFCD9575,
    "ANTIQUE_FUCHSIA": 0xFF915C83,
    "ANTIQUE_WHITE": 0xFFFAEBD7,
    "AO": 0xFF008000,
    "APPLE_GREEN": 0xFF8DB600,
    "APRICOT": 0xFFFBCEB1,
    "AQUA": 0xFF00FFFF,
    "AQUAMARINE": 0xFF7FFFD4,
    "ARMY_GREEN": 0xFF4B5320,
    "ARSENIC": 0xFF3B444B,
    "ARYLIDE_YELLOW": 0xFFE9D66B,
    "ASH_GRAY": 0xFFB2BEB5,
    "ASPARAGUS": 0xFF87A96B,
    "ATOMIC_TANGERINE": 0xFFFF9966,
    "AUBURN": 0xFFA52A2A,
    "AUREOLIN": 0xFFFDEE00,
    "AUROMETALSAURUS": 0xFF6E7F80,
    "AWESOME": 0xFFFF2052,
    "AZURE": 0xFF007FFF,
    "AZURE_MIST": 0xFFF0FFFF,
    "BABY_BLUE": 0xFF89CFF0,
    "BABY_BLUE_EYES": 0xFFA1CAF1,
    "BABY_PINK": 0xFFF4C2C2,
    "BALL_BLUE": 0xFF21ABCD,
    "BANANA_MANIA": 0xFFFAE7B5,
    "BANANA_YELLOW": 0xFFFFE135,
    "BATTLESHIP_GRAY": 0xFF848482,
    "BAZAAR": 0xFF98777B,
    "BEAU_BLUE": 0xFFBCD4E6,
    "BEAVER": 0xFF9F8170,
    "BEIGE": 0xFFF5F5DC,
    "BISQUE": 0xFFFFE4C4,
    "BISTRE": 0xFF3D2B1F,
    "BITTERSWEET": 0xFFFE6F5E,
    "BLACK": 0xFF000000,
    "BLANCHED_ALMOND": 0xFFFFEBCD,
    "BLEU_DE_FRANCE": 0xFF318CE7,
    "BLIZZARD_BLUE": 0xFFACE5EE,
    "BLOND": 0xFFFAF0BE,
    "BLUE": 0xFF0000FF,
    "BLUE_BELL": 0xFFA2A2D0,
    "BLUE_GRAY": 0xFF6699CC,
    "BLUE_GREEN": 0xFF00DDDD,
    "BLUE_VIOLET": 0xFF8A2BE2,
    "BLUSH": 0xFFDE5D83,
    "BOLE": 0xFF79443B,
    "BONDI_BLUE": 0xFF0095B6,
    "BOSTON_UNIVERSITY_RED": 0xFFCC0000,
    "BRANDEIS_BLUE": 0xFF0070FF,
    "BRASS": 0xFFB5A642,
    "BRICK_RED": 0xFFCB4154,
    "BRIGHT_CERULEAN": 0xFF1DACD6,
    "BRIGHT_GREEN": 0xFF66FF00,
    "BRIGHT_LAVENDER": 0xFFBF94E4,
    "BRIGHT_MAROON": 0xFFC32148,
    "BRIGHT_PINK": 0xFFFF007F,
    "BRIGHT_TURQUOISE": 0xFF08E8DE,
    "BRIGHT_UBE": 0xFFD19FE8,
    "BRILLIANT_LAVENDER": 0xFFF4BBFF,
    "BRILLIANT_ROSE": 0xFFFF55A3,
    "BRINK_PINK": 0xFFFB607F,
    "BRITISH_RACING_GREEN": 0xFF004225,
    "BRONZE": 0xFFCD7F32,
    "BROWN": 0xFF964B00,
    "BUBBLE_GUM": 0xFFFFC1CC,
    "BUBBLES": 0xFFE7FEFF,
    "BUFF": 0xFFF0DC82,
    "BULGARIAN_ROSE": 0xFF480607,
    "BURGUNDY": 0xFF800020,
    "BURLYWOOD": 0xFFDEB887,
    "BURNT_ORANGE": 0xFFCC5500,
    "BURNT_SIENNA": 0xFFE97451,
    "BURNT_UMBER": 0xFF8A3324,
    "BYZANTINE": 0xFFBD33A4,
    "BYZANTIUM": 0xFF702963,
    "CADET": 0xFF536872,
    "CADET_BLUE": 0xFF5F9EA0,
    "CADET_GRAY": 0xFF91A3B0,
    "CADMIUM_GREEN": 0xFF006B3C,
    "CADMIUM_ORANGE": 0xFFED872D,
    "CADMIUM_RED": 0xFFE30022,
    "CADMIUM_YELLOW": 0xFFFFF600,
    "CAL_POLY_POMONA_GREEN": 0xFF1E4D2B,
    "CAMBRIDGE_BLUE": 0xFFA3C1AD,
    "CAMEL": 0xFFC19A6B,
    "CAMOUFLAGE_GREEN": 0xFF78866B,
    "CANARY_YELLOW": 0xFFFFEF00,
    "CANDY_APPLE_RED": 0xFFFF0800,
    "CANDY_PINK": 0xFFE4717A,
    "CAPRI": 0xFF00BFFF,
    "CAPUT_MORTUUM": 0xFF592720,
    "CARDINAL": 0xFFC41E3A,
    "CARIBBEAN_GREEN": 0xFF00CC99,
    "CARMINE": 0xFF960018,
    "CARMINE_PINK": 0xFFEB4C42,
    "CARMINE_RED": 0xFFFF0038,
    "CARNATION_PINK": 0xFFFFA6C9,
    "CARNELIAN": 0xFFB31B1B,
    "CAROLINA_BLUE": 0xFF99BADD,
    "CARROT_ORANGE": 0xFFED9121,
    "CEIL": 0xFF92A1CF,
    "CELADON": 0xFFACE1AF,
    "CELESTIAL_BLUE": 0xFF4997D0,
    "CERISE": 0xFFDE3163,
    "CERISE_PINK": 0xFFEC3B83,
    "CERULEAN": 0xFF007BA7,
    "CERULEAN_BLUE": 0xFF2A52BE,
    "CG_BLUE": 0xFF007AA5,
    "CG_RED": 0xFFE03C31,
    "CHAMOISEE": 0xFFA0785A,
    "CHAMPAGNE": 0xFFF7E7CE,
    "CHARCOAL": 0xFF36454F,
    "CHARTREUSE": 0xFFDFFF00,
    "CHERRY_BLOSSOM_PINK": 0xFFFFB7C5,
    "CHESTNUT": 0xFFCD5C5C,
    "CHOCOLATE": 0xFF7B3F00,
    "CHROME_YELLOW": 0xFFFFA700,
    "CINEREOUS": 0xFF98817B,
    "CINNABAR": 0xFFE34234,
    "CINNAMON": 0xFFD2691E,
    "CITRINE": 0xFFE4D00A,
    "CLASSIC_ROSE": 0xFFFBCCE7,
    "COBALT": 0xFF0047AB,
    "COFFEE": 0xFFC86428,
    "COLUMBIA_BLUE": 0xFF9BDDFF,
    "COOL_BLACK": 0xFF002E63,
    "COOL_GRAY": 0xFF8C92AC,
    "COPPER": 0xFFB87333,
    "COPPER_ROSE": 0xFF996666,
    "COQUELICOT": 0xFFFF3800,
    "CORAL": 0xFFFF7F50,
    "CORAL_PINK": 0xFFF88379,
    "CORAL_RED": 0xFFFF4040,
    "CORDOVAN": 0xFF893F45,
    "CORN": 0xFFFBEC5D,
    "CORNFLOWER_BLUE": 0xFF6495ED,
    "CORNSILK": 0xFFFFF8DC,
    "COSMIC_LATTE": 0xFFFFF8E7,
    "COTTON_CANDY": 0xFFFFBCD9,
    "CREAM": 0xFFFFFDD0,
    "CRIMSON": 0xFFDC143C,
    "CRIMSON_GLORY": 0xFFBE0032,
    "CYAN": 0xFF00B7EB,
    "DAFFODIL": 0xFFFFFF31,
    "DANDELION": 0xFFF0E130,
    "DARK_BLUE": 0xFF00008B,
    "DARK_BROWN": 0xFF654321,
    "DARK_BYZANTIUM": 0xFF5D3954,
    "DARK_CANDY_APPLE_RED": 0xFFA40000,
    "DARK_CERULEAN": 0xFF08457E,
    "DARK_CHAMPAGNE": 0xFFC2B280,
    "DARK_CHESTNUT": 0xFF986960,
    "DARK_CORAL": 0xFFCD5B45,
    "DARK_CYAN": 0xFF008B8B,
    "DARK_ELECTRIC_BLUE": 0xFF536878,
    "DARK_GOLDENROD": 0xFFB8860B,
    "DARK_GRAY": 0xFFA9A9A9,
    "DARK_GREEN": 0xFF013220,
    "DARK_JUNGLE_GREEN": 0xFF1A2421,
    "DARK_KHAKI": 0xFFBDB76B,
    "DARK_LAVA": 0xFF483C32,
    "DARK_LAVENDER": 0xFF734F96,
    "DARK_MAGENTA": 0xFF8B008B,
    "DARK_MIDNIGHT_BLUE": 0xFF003366,
    "DARK_OLIVE_GREEN": 0xFF556B2F,
    "DARK_ORANGE": 0xFFFF8C00,
    "DARK_ORCHID": 0xFF9932CC,
    "DARK_PASTEL_BLUE": 0xFF779ECB,
    "DARK_PASTEL_GREEN": 0xFF03C03C,
    "DARK_PASTEL_PURPLE": 0xFF966FD6,
    "DARK_PASTEL_RED": 0xFFC23B22,
    "DARK_PINK": 0xFFE75480,
    "DARK_POWDER_BLUE": 0xFF003399,
    "DARK_RASPBERRY": 0xFF872657,
    "DARK_RED": 0xFF8B0000,
    "DARK_SALMON": 0xFFE9967A,
    "DARK_SCARLET": 0xFF560319,
    "DARK_SEA_GREEN": 0xFF8FBC8F,
    "DARK_SIENNA": 0xFF3C1414,
    "DARK_SLATE_BLUE": 0xFF483D8B,
    "DARK_SLATE_GRAY": 0xFF2F4F4F,
    "DARK_SPRING_GREEN": 0xFF177245,
    "DARK_TAN": 0xFF918151,
    "DARK_TANGERINE": 0xFFFFA812,
    "DARK_TERRA_COTTA": 0xFFCC4E5C,
    "DARK_TURQUOISE": 0xFF00CED1,
    "DARK_VIOLET": 0xFF9400D3,
    "DARTMOUTH_GREEN": 0xFF00693E,
    "DAVYS_GRAY": 0xFF555555,
    "DEBIAN_RED": 0xFFD70A53,
    "DEEP_CARMINE": 0xFFA9203E,
    "DEEP_CARMINE_PINK": 0xFFEF3038,
    "DEEP_CARROT_ORANGE": 0xFFE9692C,
    "DEEP_CERISE": 0xFFDA3287,
    "DEEP_CHAMPAGNE": 0xFFFAD6A5,
    "DEEP_CHESTNUT": 0xFFB94E48,
    "DEEP_FUCHSIA": 0xFFC154C1,
    "DEEP_JUNGLE_GREEN": 0xFF004B49,
    "DEEP_LILAC": 0xFF9955BB,
    "DEEP_MAGENTA": 0xFFCC00CC,
    "DEEP_PEACH": 0xFFFFCBA4,
    "DEEP_PINK": 0xFFFF1493,
    "DEEP_SAFFRON": 0xFFFF9933,
    "DENIM": 0xFF1560BD,
    "DESERT_SAND": 0xFFEDC9AF,
    "DIM_GRAY": 0xFF696969,
    "DODGER_BLUE": 0xFF1E90FF,
    "DOGWOOD_ROSE": 0xFFD71868,
    "DOLLAR_BILL": 0xFF85BB65,
    "DRAB": 0xFF967117,
    "DUKE_BLUE": 0xFF00009C,
    "EARTH_YELLOW": 0xFFE1A95F,
    "EGGPLANT": 0xFF614051,
    "EGGSHELL": 0xFFF0EAD6,
    "EGYPTIAN_BLUE": 0xFF1034A6,
    "ELECTRIC_BLUE": 0xFF7DF9FF,
    "ELECTRIC_CRIMSON": 0xFFFF003F,
    "ELECTRIC_GREEN": 0xFF00FE00,
    "ELECTRIC_INDIGO": 0xFF6F00FF,
    "ELECTRIC_LIME": 0xFFCCFF00,
    "ELECTRIC_PURPLE": 0xFFBF00FF,
    "ELECTRIC_ULTRAMARINE": 0xFF3F00FF,
    "ELECTRIC_VIOLET": 0xFF8F00FF,
    "ELECTRIC_YELLOW": 0xFFFFFE00,
    "EMERALD": 0xFF50C878,
    "ETON_BLUE": 0xFF96C8A2,
    "FALU_RED": 0xFF801818,
    "FANDANGO": 0xFFB53389,
    "FASHION_FUCHSIA": 0xFFF400A1,
    "FAWN": 0xFFE5AA70,
    "FELDGRAU": 0xFF4D5D53,
    "FERN_GREEN": 0xFF4F7942,
    "FERRARI_RED": 0xFFFF2800,
    "FIELD_DRAB": 0xFF6C541E,
    "FIREBRICK": 0xFFB22222,
    "FIRE_ENGINE_RED": 0xFFCE2029,
    "FLAME": 0xFFE25822,
    "FLAMINGO_PINK": 0xFFFC8EAC,
    "FLAVESCENT": 0xFFF7E98E,
    "FLAX": 0xFFEEDC82,
    "FLORAL_WHITE": 0xFFFFFAF0,
    "FOLLY": 0xFFFF004F,
    "FOREST_GREEN": 0xFF014421,
    "FRENCH_BEIGE": 0xFFA67B5B,
    "FRENCH_BLUE": 0xFF0072BB,
    "FRENCH_LILAC": 0xFF86608E,
    "FRENCH_ROSE": 0xFFF64A8A,
    "FUCHSIA": 0xFFFF00FF,
    "FUCHSIA_PINK": 0xFFFF77FF,
    "FULVOUS": 0xFFE48400,
    "FUZZY_WUZZY": 0xFFCC6666,
    "GAINSBORO": 0xFFDCDCDC,
    "GAMBOGE": 0xFFE49B0F,
    "GHOST_WHITE": 0xFFF8F8FF,
    "GINGER": 0xFFB06500,
    "GLAUCOUS": 0xFF6082B6,
    "GOLD": 0xFFD4AF37,
    "GOLDEN_BROWN": 0xFF996515,
    "GOLDEN_POPPY": 0xFFFCC200,
    "GOLDENROD": 0xFFDAA520,
    "GOLDEN_YELLOW": 0xFFFFDF00,
    "GRANNY_SMITH_APPLE": 0xFFA8E4A0,
    "GRAY": 0xFF808080,
    "GRAY_ASPARAGUS": 0xFF465945,
    "GREEN": 0xFF00FF00,
    "GREEN_YELLOW": 0xFFADFF2F,
    "GRULLO": 0xFFA99A86,
    "GUPPIE_GREEN": 0xFF00FF7F,
    "HALAYA_UBE": 0xFF663854,
    "HAN_BLUE": 0xFF446CCF,
    "HAN_PURPLE": 0xFF5218FA,
    "HARLEQUIN": 0xFF3FFF00,
    "HARVARD_CRIMSON": 0xFFC90016,
    "HARVEST_GOLD": 0xFFDA9100,
    "HELIOTROPE": 0xFFDF73FF,
    "HONEYDEW": 0xFFF0FFF0,
    "HOOKERS_GREEN": 0xFF007000,
    "HOT_MAGENTA": 0xFFFF1DCE,
    "HOT_PINK": 0xFFFF69B4,
    "HUNTER_GREEN": 0xFF355E3B,
    "ICEBERG": 0xFF71A6D2,
    "ICTERINE": 0xFFFCF75E,
    "INCHWORM": 0xFFB2EC5D,
    "INDIA_GREEN": 0xFF138808,
    "INDIAN_YELLOW": 0xFFE3A857,
    "INDIGO": 0xFF00416A,
    "INTERNATIONAL_KLEIN_BLUE": 0xFF002FA7,
    "INTERNATIONAL_ORANGE": 0xFFFF4F00,
    "IRIS": 0xFF5A4FCF,
    "ISABELLINE": 0xFFF4F0EC,
    "ISLAMIC_GREEN": 0xFF009000,
    "IVORY": 0xFFFFFFF0,
    "JADE": 0xFF00A86B,
    "JASMINE": 0xFFF8DE7E,
    "JASPER": 0xFFD73B3E,
    "JAZZBERRY_JAM": 0xFFA50B5E,
    "JONQUIL": 0xFFFADA5E,
    "JUNE_BUD": 0xFFBDDA57,
    "JUNGLE_GREEN": 0xFF29AB87,
    "KELLY_GREEN": 0xFF4CBB17,
    "KHAKI": 0xFFC3B091,
    "KU_CRIMSON": 0xFFE8000D,
    "LANGUID_LAVENDER": 0xFFD6CADD,
    "LAPIS_LAZULI": 0xFF26619C,
    "LA_SALLE_GREEN": 0xFF087830,
    "LASER_LEMON": 0xFFFEFE22,
    "LAVA": 0xFFCF1020,
    "LAVENDER": 0xFFB57EDC,
    "LAVENDER_BLUE": 0xFFCCCCFF,
    "LAVENDER_BLUSH": 0xFFFFF0F5,
    "LAVENDER_GRAY": 0xFFC4C3D0,
    "LAVENDER_INDIGO": 0xFF9457EB,
    "LAVENDER_MAGENTA": 0xFFEE82EE,
    "LAVENDER_MIST": 0xFFE6E6FA,
    "LAVENDER_PINK": 0xFFFBAED2,
    "LAVENDER_PURPLE": 0xFF967BB6,
    "LAVENDER_ROSE": 0xFFFBA0E3,
    "LAWN_GREEN": 0xFF7CFC00,
    "LEMON": 0xFFFFF700,
    "LEMON_CHIFFON": 0xFFFFFACD,
    "LIGHT_APRICOT": 0xFFFDD5B1,
    "LIGHT_BLUE": 0xFFADD8E6,
    "LIGHT_BROWN": 0xFFB5651D,
    "LIGHT_CARMINE_PINK": 0xFFE66771,
    "LIGHT_CORAL": 0xFFF08080,
    "LIGHT_CORNFLOWER_BLUE": 0xFF93CCEA,
    "LIGHT_CRIMSON": 0xFFF56991,
    "LIGHT_CYAN": 0xFFE0FFFF,
    "LIGHT_FUCHSIA_PINK": 0xFFF984EF,
    "LIGHT_GOLDENROD_YELLOW": 0xFFFAFAD2,
    "LIGHT_GRAY": 0xFFD3D3D3,
    "LIGHT_GREEN": 0xFF90EE90,
    "LIGHT_KHAKI": 0xFFF0E68C,
    "LIGHT_MAUVE": 0xFFDCD0FF,
    "LIGHT_PASTEL_PURPLE": 0xFFB19CD9,
    "LIGHT_PINK": 0xFFFFB6C1,
    "LIGHT_SALMON": 0xFFFFA07A,
    "LIGHT_SALMON_PINK": 0xFFFF9999,
    "LIGHT_SEA_GREEN": 0xFF20B2AA,
    "LIGHT_SKY_BLUE": 0xFF87CEFA,
    "LIGHT_SLATE_GRAY": 0xFF778899,
    "LIGHT_TAUPE": 0xFFB38B6D,
    "LIGHT_THULIAN_PINK": 0xFFE68FAC,
    "LIGHT_YELLOW": 0xFFFFFFED,
    "LILAC": 0xFFC8A2C8,
    "LIME": 0xFFBFFF00,
    "LIME_GREEN": 0xFF32CD32,
    "LINCOLN_GREEN": 0xFF195905,
    "LINEN": 0xFFFAF0E6,
    "LIVER": 0xFF534B4F,
    "LUST": 0xFFE62020,
}


def colors_a_to_l() -> dict[str, int]:
    """Return a fresh mapping of upper-case colour names (A to L) to 0xAARRGGBB values."""
    return dict(_COLORS_A_TO_L)