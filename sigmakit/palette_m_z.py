"""Named ARGB colours whose names begin with the letters M to Z."""

from __future__ import annotations

_COLORS_M_TO_Z: dict[str, int] = {
    "MAGENTA": 0xFFCA1F7B,
    "MAGIC_MINT": 0xFFAAF0D1,
    "MAGNOLIA": 0xFFF8F4FF,
    "MAHOGANY": 0xFFC04000,
    "MAJORELLE_BLUE": 0xFF6050DC,
    "MALACHITE": 0xFF0BDA51,
    "MANATEE": 0xFF979AAA,
    "MANGO_TANGO": 0xFFFF8243,
    "MAROON": 0xFF800000,
    "MAUVE": 0xFFE0B0FF,
    "MAUVELOUS": 0xFFEF98AA,
    "MAUVE_TAUPE": 0xFF915F6D,
    "MAYA_BLUE": 0xFF73C2FB,
    "MEAT_BROWN": 0xFFE5B73B,
    "MEDIUM_AQUAMARINE": 0xFF66DDAA,
    "MEDIUM_BLUE": 0xFF0000CD,
    "MEDIUM_CANDY_APPLE_RED": 0xFFE2062C,
    "MEDIUM_CARMINE": 0xFFAF4035,
    "MEDIUM_CHAMPAGNE": 0xFFF3E5AB,
    "MEDIUM_ELECTRIC_BLUE": 0xFF035096,
    "MEDIUM_JUNGLE_GREEN": 0xFF1C352D,
    "MEDIUM_LAVENDER_MAGENTA": 0xFFDDA0DD,
    "MEDIUM_ORCHID": 0xFFBA55D3,
    "MEDIUM_PERSIAN_BLUE": 0xFF0067A5,
    "MEDIUM_PURPLE": 0xFF9370DB,
    "MEDIUM_RED_VIOLET": 0xFFBB3385,
    "MEDIUM_SEA_GREEN": 0xFF3CB371,
    "MEDIUM_SLATE_BLUE": 0xFF7B68EE,
    "MEDIUM_SPRING_BUD": 0xFFC9DC87,
    "MEDIUM_SPRING_GREEN": 0xFF00FA9A,
    "MEDIUM_TAUPE": 0xFF674C47,
    "MEDIUM_TEAL_BLUE": 0xFF0054B4,
    "MEDIUM_TURQUOISE": 0xFF48D1CC,
    "MEDIUM_VIOLET_RED": 0xFFC71585,
    "MELON": 0xFFFDBCB4,
    "MIDNIGHT_BLUE": 0xFF191970,
    "MIDNIGHT_GREEN": 0xFF004953,
    "MIKADO_YELLOW": 0xFFFFC40C,
    "MINT": 0xFF3EB489,
    "MINT_CREAM": 0xFFF5FFFA,
    "MINT_GREEN": 0xFF98FF98,
    "MISTY_ROSE": 0xFFFFE4E1,
    "MOONSTONE_BLUE": 0xFF73A9C2,
    "MORDANT_RED_19": 0xFFAE0C00,
    "MOSS_GREEN": 0xFFADDFAD,
    "MOUNTAIN_MEADOW": 0xFF30BA8F,
    "MOUNTBATTEN_PINK": 0xFF997A8D,
    "MSU_GREEN": 0xFF18453B,
    "MULBERRY": 0xFFC54B8C,
    "MUSTARD": 0xFFFFDB58,
    "MYRTLE": 0xFF21421E,
    "NADESHIKO_PINK": 0xFFF6ADC6,
    "NAPIER_GREEN": 0xFF2A8000,
    "NAVAJO_WHITE": 0xFFFFDEAD,
    "NAVY": 0xFF000080,
    "NEON_CARROT": 0xFFFFA343,
    "NEON_FUCHSIA": 0xFFFE59C2,
    "NEON_GREEN": 0xFF39FF14,
    "NON_PHOTO_BLUE": 0xFFA4DDED,
    "OCEAN_BOAT_BLUE": 0xFF0077BE,
    "OCHRE": 0xFFCC7722,
    "OLD_GOLD": 0xFFCFB53B,
    "OLD_LACE": 0xFFFDF5E6,
    "OLD_LAVENDER": 0xFF796878,
    "OLD_MAUVE": 0xFF673147,
    "OLD_ROSE": 0xFFC08081,
    "OLIVE": 0xFF808000,
    "OLIVE_DRAB": 0xFF6B8E23,
    "OLIVE_DRAB_7": 0xFF3C341F,
    "OLIVINE": 0xFF9AB973,
    "ONYX": 0xFF0F0F0F,
    "OPERA_MAUVE": 0xFFB784A7,
    "ORANGE": 0xFFFF7F00,
    "ORANGE_PEEL": 0xFFFF9F00,
    "ORANGE_RED": 0xFFFF4500,
    "ORCHID": 0xFFDA70D6,
    "OU_CRIMSON_RED": 0xFF990000,
    "OUTER_SPACE": 0xFF414A4C,
    "OUTRAGEOUS_ORANGE": 0xFFFF6E4A,
    "OXFORD_BLUE": 0xFF002147,
    "PAKISTAN_GREEN": 0xFF006600,
    "PALATINATE_BLUE": 0xFF273BE2,
    "PALATINATE_PURPLE": 0xFF682860,
    "PALE_BLUE": 0xFFAFEEEE,
    "PALE_BROWN": 0xFF987654,
    "PALE_CERULEAN": 0xFF9BC4E2,
    "PALE_CHESTNUT": 0xFFDDADAF,
    "PALE_COPPER": 0xFFDA8A67,
    "PALE_CORNFLOWER_BLUE": 0xFFABCDEF,
    "PALE_GOLD": 0xFFE6BE8A,
    "PALE_GOLDENROD": 0xFFEEE8AA,
    "PALE_GREEN": 0xFF98FB98,
    "PALE_MAGENTA": 0xFFF984E5,
    "PALE_PINK": 0xFFFADADD,
    "PALE_RED_VIOLET": 0xFFDB7093,
    "PALE_ROBIN_EGG_BLUE": 0xFF96DED1,
    "PALE_SILVER": 0xFFC9C0BB,
    "PALE_SPRING_BUD": 0xFFECEBBD,
    "PALE_TAUPE": 0xFFBC987E,
    "PANSY_PURPLE": 0xFF78184A,
    "PAPAYA_WHIP": 0xFFFFEFD5,
    "PASTEL_BLUE": 0xFFAEC6CF,
    "PASTEL_BROWN": 0xFF836953,
    "PASTEL_GRAY": 0xFFCFCFC4,
    "PASTEL_GREEN": 0xFF77DD77,
    "PASTEL_MAGENTA": 0xFFF49AC2,
    "PASTEL_ORANGE": 0xFFFFB347,
    "PASTEL_PINK": 0xFFFFD1DC,
    "PASTEL_PURPLE": 0xFFB39EB5,
    "PASTEL_RED": 0xFFFF6961,
    "PASTEL_VIOLET": 0xFFCB99C9,
    "PASTEL_YELLOW": 0xFFFDFD96,
    "PATRIARCH": 0xFF800080,
    "PAYNES_GRAY": 0xFF40404F,
    "PEACH": 0xFFFFE5B4,
    "PEACH_ORANGE": 0xFFFFCC99,
    "PEACH_PUFF": 0xFFFFDAB9,
    "PEACH_YELLOW": 0xFFFADFAD,
    "PEAR": 0xFFD1E231,
    "PEARL_AQUA": 0xFF88D8C0,
    "PERIDOT": 0xFFE6E200,
    "PERSIAN_BLUE": 0xFF1C39BB,
    "PERSIAN_GREEN": 0xFF00A693,
    "PERSIAN_INDIGO": 0xFF32127A,
    "PERSIAN_ORANGE": 0xFFD99058,
    "PERSIAN_PINK": 0xFFF77FBE,
    "PERSIAN_PLUM": 0xFF701C1C,
    "PERSIAN_RED": 0xFFCC3333,
    "PERSIAN_ROSE": 0xFFFE28A2,
    "PERSIMMON": 0xFFEC5800,
    "PHLOX": 0xFFDF00FF,
    "PHTHALO_BLUE": 0xFF000F89,
    "PHTHALO_GREEN": 0xFF123524,
    "PIGGY_PINK": 0xFFFDDDE6,
    "PINE_GREEN": 0xFF01796F,
    "PINK": 0xFFFFC0CB,
    "PINK_PEARL": 0xFFE7ACCF,
    "PINK_SHERBET": 0xFFF78FA7,
    "PISTACHIO": 0xFF93C572,
    "PLATINUM": 0xFFE5E4E2,
    "PLUM": 0xFF8E4585,
    "PORTLAND_ORANGE": 0xFFFF5A36,
    "POWDER_BLUE": 0xFFB0E0E6,
    "PRINCETON_ORANGE": 0xFFFF8F00,
    "PRUSSIAN_BLUE": 0xFF003153,
    "PUCE": 0xFFCC8899,
    "PUMPKIN": 0xFFFF7518,
    "PURPLE": 0xFF9F00C5,
    "PURPLE_HEART": 0xFF69359C,
    "PURPLE_MOUNTAIN_MAJESTY": 0xFF9678B6,
    "PURPLE_PIZZAZZ": 0xFFFE4EDA,
    "PURPLE_TAUPE": 0xFF50404D,
    "QUARTZ": 0xFF51484F,
    "RADICAL_RED": 0xFFFF355E,
    "RASPBERRY": 0xFFE30B5D,
    "RASPBERRY_PINK": 0xFFE25098,
    "RASPBERRY_ROSE": 0xFFB3446C,
    "RAW_UMBER": 0xFF826644,
    "RAZZLE_DAZZLE_ROSE": 0xFFFF33CC,
    "RAZZMATAZZ": 0xFFE3256B,
    "RED": 0xFFFF0000,
    "REDWOOD": 0xFFAB4E52,
    "REGALIA": 0xFF522D80,
    "RICH_BLACK": 0xFF004040,
    "RICH_BRILLIANT_LAVENDER": 0xFFF1A7FE,
    "RICH_CARMINE": 0xFFD70040,
    "RICH_ELECTRIC_BLUE": 0xFF0892D0,
    "RICH_LAVENDER": 0xFFA76BCF,
    "RICH_LILAC": 0xFFB666D2,
    "RICH_MAROON": 0xFFB03060,
    "RIFLE_GREEN": 0xFF414833,
    "ROBIN_EGG_BLUE": 0xFF00CCCC,
    "ROSE_BONBON": 0xFFF9429E,
    "ROSE_EBONY": 0xFF674846,
    "ROSE_GOLD": 0xFFB76E79,
    "ROSE_PINK": 0xFFFF66CC,
    "ROSE_QUARTZ": 0xFFAA98A9,
    "ROSE_TAUPE": 0xFF905D5D,
    "ROSEWOOD": 0xFF65000B,
    "ROSSO_CORSA": 0xFFD40000,
    "ROSY_BROWN": 0xFFBC8F8F,
    "ROYAL_AZURE": 0xFF0038A8,
    "ROYAL_BLUE": 0xFF002366,
    "ROYAL_FUCHSIA": 0xFFCA2C92,
    "ROYAL_PURPLE": 0xFF7851A9,
    "RUBY": 0xFFE0115F,
    "RUDDY": 0xFFFF0028,
    "RUDDY_BROWN": 0xFFBB6528,
    "RUDDY_PINK": 0xFFE18E96,
    "RUFOUS": 0xFFA81C07,
    "RUSSET": 0xFF80461B,
    "RUST": 0xFFB7410E,
    "SACRAMENTO_STATE_GREEN": 0xFF00563F,
    "SADDLE_BROWN": 0xFF8B4513,
    "SAFETY_ORANGE": 0xFFFF6700,
    "SAFFRON": 0xFFF4C430,
    "SALMON": 0xFFFF8C69,
    "SALMON_PINK": 0xFFFF91A4,
    "SANDSTORM": 0xFFECD540,
    "SANDY_BROWN": 0xFFF4A460,
    "SANGRIA": 0xFF92000A,
    "SAP_GREEN": 0xFF507D2A,
    "SAPPHIRE": 0xFF082567,
    "SATIN_SHEEN_GOLD": 0xFFCBA135,
    "SCARLET": 0xFFFF2400,
    "SCHOOL_BUS_YELLOW": 0xFFFFD800,
    "SCREAMIN_GREEN": 0xFF76FF7A,
    "SEA_GREEN": 0xFF2E8B57,
    "SEAL_BROWN": 0xFF321414,
    "SEASHELL": 0xFFFFF5EE,
    "SELECTIVE_YELLOW": 0xFFFFBA00,
    "SEPIA": 0xFF704214,
    "SHADOW": 0xFF8A795D,
    "SHAMROCK_GREEN": 0xFF009E60,
    "SHOCKING_PINK": 0xFFFC0FC0,
    "SIENNA": 0xFF882D17,
    "SILVER": 0xFFC0C0C0,
    "SINOPIA": 0xFFCB410B,
    "SKOBELOFF": 0xFF007474,
    "SKY_BLUE": 0xFF87CEEB,
    "SKY_MAGENTA": 0xFFCF71AF,
    "SLATE_BLUE": 0xFF6A5ACD,
    "SLATE_GRAY": 0xFF708090,
    "SMOKEY_TOPAZ": 0xFF933D41,
    "SMOKY_BLACK": 0xFF100C08,
    "SNOW": 0xFFFFFAFA,
    "SPIRO_DISCO_BALL": 0xFF0FC0FC,
    "SPLASHED_WHITE": 0xFFFEFDFF,
    "SPRING_BUD": 0xFFA7FC00,
    "STEEL_BLUE": 0xFF4682B4,
    "ST_PATRICKS_BLUE": 0xFF23297A,
    "STRAW": 0xFFE4D96F,
    "SUNGLOW": 0xFFFFCC33,
    "TAN": 0xFFD2B48C,
    "TANGELO": 0xFFF94D00,
    "TANGERINE": 0xFFF28500,
    "TANGERINE_YELLOW": 0xFFFFCC00,
    "TAUPE_GRAY": 0xFF8B8589,
    "TEA_GREEN": 0xFFD0F0C0,
    "TEAL": 0xFF008080,
    "TEAL_BLUE": 0xFF367588,
    "TEAL_GREEN": 0xFF006D5B,
    "TENN": 0xFFCD5700,
    "TERRA_COTTA": 0xFFE2725B,
    "THISTLE": 0xFFD8BFD8,
    "THULIAN_PINK": 0xFFDE6FA1,
    "TICKLE_ME_PINK": 0xFFFC89AC,
    "TIFFANY_BLUE": 0xFF0ABAB5,
    "TIGER_EYE": 0xFFE08D3C,
    "TIMBERWOLF": 0xFFDBD7D2,
    "TITANIUM_YELLOW": 0xFFEEE600,
    "TOMATO": 0xFFFF6347,
    "TOOLBOX": 0xFF746CC0,
    "TOPAZ": 0xFFFFC87C,
    "TRACTOR_RED": 0xFFFD0E35,
    "TROPICAL_RAIN_FOREST": 0xFF00755E,
    "TRUE_BLUE": 0xFF0073CF,
    "TUFTS_BLUE": 0xFF417DC1,
    "TUMBLEWEED": 0xFFDEAA88,
    "TURKISH_ROSE": 0xFFB57281,
    "TURQUOISE": 0xFF30D5C8,
    "TURQUOISE_BLUE": 0xFF00FFEF,
    "TURQUOISE_GREEN": 0xFFA0D6B4,
    "TUSCAN_RED": 0xFF66424D,
    "TWILIGHT_LAVENDER": 0xFF8A496B,
    "TYRIAN_PURPLE": 0xFF66023C,
    "UA_BLUE": 0xFF0033AA,
    "UA_RED": 0xFFD9004C,
    "UBE": 0xFF8878C3,
    "UCLA_BLUE": 0xFF536895,
    "UCLA_GOLD": 0xFFFFB300,
    "UFO_GREEN": 0xFF3CD070,
    "ULTRAMARINE": 0xFF120A8F,
    "ULTRAMARINE_BLUE": 0xFF4166F5,
    "ULTRA_PINK": 0xFFFF6FFF,
    "UMBER": 0xFF635147,
    "UNITED_NATIONS_BLUE": 0xFF5B92E5,
    "UNIVERSITY_OF_CALIFORNIA_GOLD": 0xFFB78727,
    "UNMELLOW_YELLOW": 0xFFFFFF66,
    "UP_MAROON": 0xFF7B1113,
    "UPSDELL_RED": 0xFFAE2029,
    "UROBILIN": 0xFFE1AD21,
    "UTAH_CRIMSON": 0xFFD3003F,
    "VEGAS_GOLD": 0xFFC5B358,
    "VENETIAN_RED": 0xFFC80815,
    "VERDIGRIS": 0xFF43B3AE,
    "VERONICA": 0xFFA020F0,
    "VIOLET": 0xFF7F00FF,
    "VIRIDIAN": 0xFF40826D,
    "VIVID_AUBURN": 0xFF922724,
    "VIVID_BURGUNDY": 0xFF9F1D35,
    "VIVID_CERISE": 0xFFDA1D81,
    "VIVID_TANGERINE": 0xFFFFA089,
    "VIVID_VIOLET": 0xFF9F00FF,
    "WARM_BLACK": 0xFF004242,
    "WENGE": 0xFF645452,
    "WHEAT": 0xFFF5DEB3,
    "WHITE": 0xFFFFFFFF,
    "WHITE_SMOKE": 0xFFF5F5F5,
    "WILD_BLUE_YONDER": 0xFFA2ADD0,
    "WILD_STRAWBERRY": 0xFFFF43A4,
    "WILD_WATERMELON": 0xFFFC6C85,
    "WINE": 0xFF722F37,
    "WISTERIA": 0xFFC9A0DC,
    "XANADU": 0xFF738678,
    "YALE_BLUE": 0xFF0F4D92,
    "YELLOW": 0xFFFFFF00,
    "YELLOW_GREEN": 0xFF9ACD32,
    "YELLOW_ORANGE": 0xFFFFEF02,
    "ZAFFRE": 0xFF0014A8,
    "ZINNWALDITE_BROWN": 0xFF2C1608,
}


def colors_m_to_z() -> dict[str, int]:
    """Return a fresh mapping of upper-case colour names (M to Z) to 0xAARRGGBB values."""
    return dict(_COLORS_M_TO_Z)