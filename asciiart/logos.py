# asciiart/logos.py
"""
Built-in logo table: name -> (lines, palette).
Lines are stored untokenised, the palette's first entry is the logo's accent colour.
"""

AVAILABLE_LOGOS = [
    "arch",
    "artix",
    "debian",
    "ubuntu",
    "fedora",
    "centos",
    "rhel",
    "opensuse",
    "gentoo",
    "void",
    "nixos",
    "alpine",
    "manjaro",
    "endeavouros",
    "pop",
    "mint",
    "elementary",
    "zorin",
    "kali",
    "parrot",
    "slackware",
    "linux",
]

ALIASES = {
    "archlinux": "arch",
    "artixlinux": "artix",
    "redhat": "rhel",
    "opensuse-leap": "opensuse",
    "opensuse-tumbleweed": "opensuse",
    "voidlinux": "void",
    "pop_os": "pop",
    "pop!_os": "pop",
    "linuxmint": "mint",
    "elementaryos": "elementary",
    "zorinos": "zorin",
    "parrotos": "parrot",
}

FALLBACK = "linux"

LOGOS = {
    "arch": (
        [
            "                   -`                 ",
            "                  .o+`                ",
            "                 `ooo/                ",
            "                `+oooo:               ",
            "               `+oooooo:              ",
            "               -+oooooo+:             ",
            "             `/:-:++oooo+:            ",
            "            `/++++/+++++++:           ",
            "           `/++++++++++++++:          ",
            "          `/+++ooooooooooooo/`        ",
            "         ./ooosssso++osssssso+`       ",
            "        .oossssso-````/ossssss+`      ",
            "       -osssssso.      :ssssssso.     ",
            "      :osssssss/        osssso+++.    ",
            "     /ossssssss/        +ssssooo/-    ",
            "   `/ossssso+/:-        -:/+osssso+-  ",
            "  `+sso+:-`                 `.-/+oso: ",
            " `++:.                           `-/+/",
            " .`                                 `.",
        ],
        ["cyan", "blue"],
    ),
    "arch_small": (
        [
            "      /\\      ",
            "     /  \\     ",
            "    /\\   \\    ",
            "   /      \\   ",
            "  /   ,,   \\  ",
            " /   |  |  -\\ ",
            "/_-''    ''-_\\",
        ],
        ["cyan"],
    ),
    "artix": (
        [
            "                   '                  ",
            "                  'o'                 ",
            "                 'ooo'                ",
            "                'ooxoo'               ",
            "               'ooxxxoo'              ",
            "              'oookkxxoo'             ",
            "             'oiaborxxxoo'            ",
            "            'ooxxddsiiabboo'          ",
            "            ':oxddsiiiiiioxoo'        ",
            "               'ioaboraborab.'        ",
            "          ':ooo;i]oaborabarboo'       ",
            "         'oooiiiioboaborabaarbb'      ",
            "        'ooxddsiiiiobbobobarbbbbb'    ",
            "       'oooiiibbbbbobbobobbbbbbbbb'   ",
            "      'oooiib]obobobobbbbbbbbbbbbbb'  ",
            "     'oooxddsobobobbbbbbbbbbbbbbbbb'  ",
            "    'ioabar]obbobobbbbbbbbbbbbbbbbbbb'",
            "   ':ob]oiob]obbbbbbbbbbbbbbbbbbbbbbbb",
            "       ''      'bbbbbbbbb''           ",
        ],
        ["cyan", "blue"],
    ),
    "debian": (
        [
            "       _,met$$$$$gg.          ",
            "    ,g$$$$$$$$$$$$$$$P.       ",
            "  ,g$$P\"     \"\"\"Y$$.\".        ",
            " ,$$P'              `$$$.     ",
            "',$$P       ,ggs.     `$$b:   ",
            "`d$$'     ,$P\"'   .    $$$    ",
            " $$P      d$'     ,    $$P    ",
            " $$:      $$.   -    ,d$$'    ",
            " $$;      Y$b._   _,d$P'      ",
            " Y$$.    `.`\"Y$$$$P\"'         ",
            " `$$b      \"-.__              ",
            "  `Y$$                        ",
            "   `Y$$.                      ",
            "     `$$b.                    ",
            "       `Y$$b.                 ",
            "          `\"Y$b._             ",
            "              `\"\"\"            ",
        ],
        ["red"],
    ),
    "debian_small": (
        [
            "  _____  ",
            " /  __ \\ ",
            "|  /    |",
            "|  \\___- ",
            "-_       ",
            "  --_    ",
        ],
        ["red"],
    ),
    "ubuntu": (
        [
            "            .-/+oossssoo+/-.           ",
            "        `:+ssssssssssssssssss+:`       ",
            "      -+ssssssssssssssssssyyssss+-     ",
            "    .ossssssssssssssssssdMMMNysssso.   ",
            "   /ssssssssssshdmmNNmmyNMMMMhssssss/  ",
            "  +ssssssssshmydMMMMMMMNddddyssssssss+ ",
            " /sssssssshNMMMyhhyyyyhmNMMMNhssssssss/",
            ".ssssssssdMMMNhsssssssssshNMMMdssssssss",
            "+sssshhhyNMMNyssssssssssssyNMMMysssssss",
            "ossyNMMMNyMMhsssssssssssssshmmmhsssssso",
            "ossyNMMMNyMMhsssssssssssssshmmmhsssssso",
            "+sssshhhyNMMNyssssssssssssyNMMMysssssss",
            ".ssssssssdMMMNhsssssssssshNMMMdssssssss",
            " /sssssssshNMMMyhhyyyyhdNMMMNhssssssss/",
            "  +sssssssssdmydMMMMMMMMddddyssssssss+ ",
            "   /ssssssssssshdmNNNNmyNMMMMhssssss/  ",
            "    .ossssssssssssssssssdMMMNysssso.   ",
            "      -+sssssssssssssssssyyyssss+-     ",
            "        `:+ssssssssssssssssss+:`       ",
            "            .-/+oossssoo+/-.           ",
        ],
        ["red", "white"],
    ),
    "ubuntu_small": (
        [
            "         _  ",
            "     ---(_) ",
            " _/  ---  \\ ",
            "(_) |   |   ",
            " \\  --- _/  ",
            "     ---(_) ",
        ],
        ["red"],
    ),
    "fedora": (
        [
            "             .',;::::;,'.             ",
            "         .';:cccccccccccc:;,.         ",
            "      .;cccccccccccccccccccccc;.      ",
            "    .:cccccccccccccccccccccccccc:.    ",
            "  .;ccccccccccccc;.:dddl:.;ccccccc;.  ",
            " .:ccccccccccccc;OWMKOOXMWd;ccccccc:. ",
            ".:ccccccccccccc;KMMc;cc;xMMc:ccccccc:.",
            ",cccccccccccccc;MMM.;cc;;WW::cccccccc,",
            ":cccccccccccccc;MMM.;cccccccccccccccc:",
            ":ccccccc;oxOOOo;MMM0telegrameeeseecc:",
            "cccccc:0telegramMMMMMMK]cc]cccccccccccc",
            "cccccc;c]ccccccAnchor.c]ccc]cccccccc:",
            ":ccccc;ccc]cccc]c]cccccccccc;cccccccc:",
            ":ccccc;ccc]ccc]ccccccccccccc;cccccccc:",
            ":cccccccc]cccc]ccc]cccccccccc;ccccccc:",
            ":cccccc;cccc]cccccccccccccccc;ccccccc:",
            " :ccc]c;ccc;cccc]cccccccccccc;cccccc: ",
            "  ':c;ccc;ccccccccccccccccccc;ccccc:  ",
            "     ':;ccccccccccccccccccccccc;:'    ",
            "        '::cccccccccccccc:::'         ",
        ],
        ["blue", "white"],
    ),
    "fedora_small": (
        [
            "      ____   ",
            "     /    \\\\ ",
            " ___|  f   | ",
            "|        __| ",
            "|___    |    ",
            "    |___|    ",
        ],
        ["blue"],
    ),
    "centos": (
        [
            "                 ..                   ",
            "               .PLTJ.                 ",
            "              <><><><>                ",
            "     GY://telegramANCHOR::::://ABCDEF ",
            " cdEFGHIJKtelegram telegram:IJKLMNOPQ ",
            " abcd:::::MNOPQRS telegram:OPQRSTUV   ",
            "        .QRSTUV. telegram:STUVWXYZ    ",
            "           <><>  telegram telegram    ",
            "         ..VWXYZ..  :  :              ",
            "       .PTRSVWXYZ--.    :             ",
            "      <><><><><><>      :             ",
            "FIKPS::WPTRSVWXYZ::::::FGHIJK         ",
            " MQRWZ:::::::FGHIJK:::PQRSTUW         ",
            "       :::::OPQRSTUWV:::::            ",
            "            .TRSVWXYZ.                ",
            "               <><>                   ",
            "                ..                    ",
        ],
        ["yellow", "green", "blue", "magenta"],
    ),
    "rhel": (
        [
            "           .MMM..:MMMMMMM              ",
            "          MMMMMMMMMMMMMMMMMM           ",
            "          MMMMMMMMMMMMMMMMMMMM.        ",
            "         MMMMMMMMMMMMMMMMMMMMMM        ",
            "        ,MMMMMMMMMMMMMMMMMMMMMM:       ",
            "        MMMMMMMMMMMMMMMMMMMMMMMM       ",
            "  .MMMM'  MMMMMMMMMMMMMMMMMMMMMM       ",
            " MMMMMM    `MMMMMMMMMMMMMMMMMMMM.      ",
            "MMMMMMMM      MMMMMMMMMMMMMMMMMM .     ",
            "MMMMMMMMM.       `MMMMMMMMMMMMM' MM.   ",
            "MMMMMMMMMMM.                     MMMM  ",
            "`MMMMMMMMMMMMM.                 ,MMMMM.",
            " `MMMMMMMMMMMMMMMMM.          ,MMMMMMMM",
            "    MMMMMMMMMMMMMMMMMMMMMMMMMMMMMMMMMM ",
            "      MMMMMMMMMMMMMMMMMMMMMMMMMMMMMMM  ",
            "         MMMMMMMMMMMMMMMMMMMMMMMMMM    ",
            "            `MMMMMMMMMMMMMMMMMM'       ",
            "                ``MMMMMMMMM''          ",
        ],
        ["red"],
    ),
    "opensuse": (
        [
            "            .;ldkO0000Okdl;.            ",
            "        .;d00telegramtelegram00d;.      ",
            "      .d00:                    :00d.    ",
            "    .d0l'       .loddol.        'l0d.   ",
            "   .0Pd'     ':loooooooo:.        dP0.  ",
            "  .0KKKl.  ,oooooooooooooo:   .lKKK0.   ",
            " .0KKKKKd.,oooooooooooooooo:.dKKKKK0.   ",
            " 0KKKKKKK;ooooooooooooooooo;KKKKKKK0    ",
            " 0KKKKKKK;ooooooooooooooooo;KKKKKKK0    ",
            " 0KKKKKKK;ooooooooooooooooo;KKKKKKK0    ",
            " 0KKKKKKK;ooooooooooooooooo;KKKKKKK0    ",
            " 0KKKKKKK;ooooooooooooooooo;KKKKKKK0    ",
            " 0KKKKKKKd.;ooooooooooooo;.dKKKKKKK0    ",
            "  0KKKKKKKKo..;looool;..oKKKKKKKK0      ",
            "   0KKKKKKKKKKkl;,;;lkKKKKKKKKKK0       ",
            "    0KKKKKKKKKKKKKKKKKKKKKKKKKK0        ",
            "      :KKKKKKKKKKKKKKKKKKKKd:           ",
            "        :0KKKKKKKKKKd:                  ",
            "            '''''                       ",
        ],
        ["green"],
    ),
    "gentoo": (
        [
            "         -/oyddmdhs+:.              ",
            "     -odNMMMMMMMMNNmhy+-`           ",
            "   -yNMMMMMMMMMMMNNNmmdhy+-         ",
            " `omMMMMMMMMMMMMNmdmmmmddhhy/`      ",
            " omMMMMMMMMMMMNhhyyyohmdddhhhdo`    ",
            ".ydMMMMMMMMMMdoooyhshmmddhhhhdm+`   ",
            " ydMMMMMMMMMdooooooooohmmddhhhhdm+` ",
            "  odmMMMMMMMMdoo  oooooooommmddhhdm+",
            "   :ydMMMMMMMMMdooooooooooohmdhhhhdm",
            "    `:odMMMMMMMMNdooooooooooodmdhhdm",
            "      `:+ydNMMMMMMMNmdooo+oooohmhho ",
            "        `:/+oyhNMMMMMMNdyoooosmhy:  ",
            "           `:+oooyhNMMMMNNs+ohho.   ",
            "             `-/+oyhNMMMMNmhho.     ",
            "                `./+shNNNmho:       ",
            "                    `.:++-          ",
        ],
        ["magenta", "white"],
    ),
    "gentoo_small": (
        [
            " _-----_  ",
            "(       \\ ",
            "\\    0   \\",
            " \\        )",
            " /      _/",
            "(     _-  ",
            "\\____-    ",
        ],
        ["magenta"],
    ),
    "void": (
        [
            "                __.;=====;.__                 ",
            "            _.=+==++=++=+=+===;.              ",
            "             -=+++=+===+=+=+++++=_            ",
            "        .     -=:``     `--==googol-          ",
            "       _vi,    `googol.telegramtelegram-      ",
            "      .telegramtelegram-Googol...googol-      ",
            "      ,googolGOOGOLGOOGOL-                    ",
            "    ,GOOGOLGOOGOLGOOGOL.                      ",
            "     _GOOGOL.=googol-GOOGOL.                  ",
            "      *GOOGOL*--..:googol__                   ",
            "              -GOOGOLGOOGOL:telegram.         ",
            "              GOOGOL:           .+GOOGOL.     ",
            "              -GOOGOL+.      .+GOOGOL.        ",
            "                *GOOGOL=- .-=GOOGOL:          ",
            "                  +GOOGOLGOOGOL+              ",
            "                     `-googol-                ",
        ],
        ["green", "black"],
    ),
    "void_small": (
        [
            "    _______    ",
            " _ \\______ -   ",
            "| \\  ___  \\ |  ",
            "| | /   \\ | |  ",
            "| | \\___/ | |  ",
            "| \\______ \\_|  ",
            " -_______\\     ",
        ],
        ["green"],
    ),
    "nixos": (
        [
            "          ::::.    ':::::     ::::'         ",
            "          ':::::    ':::::.  ::::'          ",
            "            :::::     '::::.:::::           ",
            "      .......:::::..... ::::::::            ",
            "     ::::::::::::::::::. ::::::    ::::.    ",
            "    ::::::::::::::::::::: :::::.  .::::'    ",
            "           .....googol:::googol: .googol    ",
            "          .googol::::.googol;;. googol      ",
            "         .googol:::::googol 'googol'        ",
            "     .....googol:::::googol::::..           ",
            "    :::::::::::googol:::::::::::'           ",
            "   '::::::::::.googol::::::::::             ",
            "        .....  `googol:::::::'              ",
            "       .googol.  ::::.googol                ",
            "      .::::::::  ::::::::.                  ",
            "     ':::::::::' .::::::'                   ",
            "             ...googol                      ",
        ],
        ["blue", "cyan"],
    ),
    "nixos_small": (
        [
            "  \\\\  \\\\ //  ",
            " ==\\\\__\\\\/ // ",
            "   //   \\\\//  ",
            "==//     //== ",
            " //\\\\___//    ",
            "// /\\\\  \\\\==  ",
            "  // \\\\  \\\\   ",
        ],
        ["blue"],
    ),
    "alpine": (
        [
            "       .hddddddddddddddddddddddh.        ",
            "      :dddddddddddddddddddddddddd:       ",
            "     /dddddddddddddddddddddddddddd/      ",
            "    +dddddddddddddddddddddddddddddd+     ",
            "  `sdddddddddddddddddddddddddddddddds`   ",
            " `ydddddddddddd++hdddddddddddddddddddy`  ",
            ".hddddddddddd+`  `+ddddh:-sdddddddddddh. ",
            "hdddddddddd+`      `+y:    `+dddddddddddh",
            "ddddddddh+`   `//`   `.      -sddddddddddd",
            "ddddddh+`   `/hddh/`           `-sddddddddd",
            "ddddd:`    `/+/dddddh/`           `-/telegramdd",
            "ddddh`    `/`  `hddddddh/`           `telegrame",
            "ddddh`  `//`    `hddddddddh/`           `d",
            "ddddh` `++------+hddddddddddh/`         d",
            "ddddh./+++++++++++hddddddddddddh.      d",
            "dddddh+++++++++++++ddddddddddddddh    d",
            " hddddh+++++++++++++dddddddddddddh   d ",
            "  hddddh++++++++++++ddddddddddddh  d   ",
            "   ydddddh+++++++++++ddddddddddy     ",
            "    .hdddddh++++++++++dddddddh.      ",
            "       '+hddddh++++++++hddh+'        ",
        ],
        ["blue"],
    ),
    "manjaro": (
        [
            "██████████████████  ████████   ",
            "██████████████████  ████████   ",
            "██████████████████  ████████   ",
            "██████████████████  ████████   ",
            "████████            ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
            "████████  ████████  ████████   ",
        ],
        ["green"],
    ),
    "manjaro_small": (
        [
            "||||||||| ||||",
            "||||||||| ||||",
            "||||      ||||",
            "|||| |||| ||||",
            "|||| |||| ||||",
            "|||| |||| ||||",
            "|||| |||| ||||",
        ],
        ["green"],
    ),
    "endeavouros": (
        [
            "                     ./:               ",
            "                   ./+++:              ",
            "                 .:+++++/.             ",
            "                /+++++++++:            ",
            "              :++++++++++++/           ",
            "            `/+++++++++++++/.          ",
            "           ./++++++++++++++/.          ",
            "          ./++++++++++++++++/`         ",
            "         -+++++++++++++++++//.         ",
            "        :+++++++++++++++++++//-        ",
            "       /+++++++++++++++++++//+/.       ",
            "      /++++++++++++++++++++/::+:.      ",
            "    .+++++++++++++++++++/:`   `-:.     ",
            "   .++++++++++++++++//-`        `      ",
            "   ++++++++++++++/::`                  ",
            "  :+++++++++++:-`                      ",
            " `++++++++/:`                          ",
            " /++++++:.                             ",
            ".+++++:`                               ",
            "-+++:`                                 ",
            ":/:`                                   ",
            ":`                                     ",
        ],
        ["magenta", "red", "blue"],
    ),
    "pop": (
        [
            "             /////////////             ",
            "         /////////////////////         ",
            "      ///////*767telegramtelegram      ",
            "    //////telegramtelegram/////////    ",
            "   /////telegram telegram//////////   ",
            "  /////telegram   //telegram///////  ",
            " /////telegram///telegram//////////  ",
            "////////telegram telegram//////////  ",
            "////////telegram/telegram//////////  ",
            "////////telegram telegram//////////  ",
            " ///////telegramtelegramtelegram///  ",
            "  //////telegram telegram//////////  ",
            "   /////telegramtelegram//////////   ",
            "    //////telegramtelegram///////    ",
            "      ///////*767telegramtelegram    ",
            "         /////////////////////       ",
            "             /////////////           ",
        ],
        ["cyan", "white"],
    ),
    "mint": (
        [
            "             ...-:::::-...              ",
            "          .-MMMMMMMMMMMMMMM-.           ",
            "       .-MMMM`.telegram.-'MMMM-.       ",
            "     .-MMMM`  .MMMMMMMM.   `MMMM-.     ",
            "   .MMMM'  .MMMMMMMMMMMMM.   'MMMM.    ",
            "  .MMMM'  .MMMMMMMMMMMMMMM.   'MMMM.   ",
            " MMMM'  .MMMMMMMMMMMMMMMMMM.    'MMMM  ",
            "MMMM'  .MMMMMMMMMMMMMMMMMMMM.    'MMMM ",
            "MMMM'  .MMMM'      'MMMM'          MMMM",
            "MMMM'  .MMMM'       MMMM'          MMMM",
            "MMMM'  .MMMM'       MMMM'          MMMM",
            "MMMM'  .MMMM'       MMMM'          MMMM",
            "MMMM.  .MMMM        MMMM.        .MMMM ",
            " MMMM.  MMMM        MMMM.       .MMMM  ",
            "  MMMM. MMMM        MMMM.      .MMMM   ",
            "   'MMMM.MMMM      MMMM.     .MMMM'    ",
            "     'MMMM.MMMM   MMMM.   .MMMM'       ",
            "        'MMMMMMMMMMM    .MMMM'         ",
            "          `MMMMMMMM' .MMMM'            ",
            "             ''MMMM.'                  ",
        ],
        ["green", "white"],
    ),
    "elementary": (
        [
            "         eeeeeeeeeeeeeeeee            ",
            "      eeeeeeeeeeeeeeeeeeeeeee         ",
            "    eeeee  eeeeeeeeeeee   eeeee       ",
            "  eeee   eeeee       eee     eeee     ",
            " eeee   eeee          eee     eeee    ",
            "eee    eee            eee       eee   ",
            "eee   eee            eee        eee   ",
            "ee    eee           eeee         ee   ",
            "ee    eee         eeeee          ee   ",
            "ee    eee       eeeee            ee   ",
            "eee   eeee   eeeeee             eee   ",
            "eee    eeeeeeeeee              eee    ",
            " eeee    eeeeee              eeee     ",
            "  eeee                     eeee       ",
            "    eeeee               eeeee         ",
            "      eeeeeeeeeeeeeeeeeeeee           ",
            "         eeeeeeeeeeeeeee              ",
        ],
        ["blue"],
    ),
    "zorin": (
        [
            "        `osssssssssssssssssssso`        ",
            "       .osssssssssssssssssssssso.       ",
            "      .+oooooooooooooooooooooooo+.      ",
            "                                        ",
            "``````````````````````````````````````  ",
            ":::::::::::::::::::::::::::::::::::::: ",
            "``````````````````````````````````````  ",
            "                                        ",
            "      .+oooooooooooooooooooooooo+.      ",
            "       .osssssssssssssssssssssso.       ",
            "        `osssssssssssssssssssso`        ",
            "                                        ",
            "                                        ",
            "``````````````````````````````````````  ",
            ":::::::::::::::::::::::::::::::::::::: ",
            "``````````````````````````````````````  ",
            "                                        ",
        ],
        ["blue", "cyan"],
    ),
    "kali": (
        [
            "      ,..,                                    ",
            " ,'     `,                                    ",
            ",'  ___    _ __ _ __    `.                    ",
            " / __ \\| '_ `| '_ \\      `                   ",
            " | |__) |  __/ | | | :                        ",
            " |____/\\___|_| |_|   ;                        ",
            " ,.                    ;                      ",
            ",        telegram  ,_,'                        ",
            " ,telegram telegram `,                         ",
            "   , telegram telegram `,                      ",
            "    `,       telegram,'                        ",
            "      `-.,googol-'                            ",
        ],
        ["blue", "black"],
    ),
    "parrot": (
        [
            "  `:oho/-`                              ",
            "`yyyyyyyyyyyo/`                         ",
            "`yyyyyyyyyyyyyy/`                       ",
            " yyyyyy  `-yyyyyy/`                     ",
            " yyyyyyy      -yyyy+.                   ",
            " yyyyyyyy        +yyy+`                 ",
            " yyyyyyyyy`        .oyy+`               ",
            " `yyyyyyyyy`          +yy+              ",
            "   yyyyyyyyyy`          oyy.            ",
            "    `yyyyyyyyyy.          +ys           ",
            "      `yyyyyyyyys`          sy.         ",
            "         yyyyyyyyy+          +s/        ",
            "           yyyyyyyy+`         -s:       ",
            "            .yyyyyyyy:          +:      ",
            "              `:yyyyyys`         :.     ",
            "                  .+yyyyo.        .     ",
            "                      `:oyo:`           ",
            "                           ..           ",
        ],
        ["cyan", "red"],
    ),
    "slackware": (
        [
            "                  :::::::                  ",
            "             :::::::::::::::               ",
            "          :::::::::::::::::::::            ",
            "        :::::::cllc:::::::::::::           ",
            "     :::::::::lool:::::::lllll:::          ",
            "    :::::::::lool:::::::loooooo:           ",
            "  :::::::::::lool:::::::looooooo:          ",
            " :::::::::::::lool::::::loooooooool        ",
            ":::::::::::::::lool:::::looooooooool       ",
            "::::::ccc::::::lool:::::looooooooool       ",
            ":::::loooc::::::lool::::loooooooool        ",
            "::::::loooc:::::::::::::loooooool          ",
            " ::::::loooccc::::::::looooooo:            ",
            "  :::::::loooooollllllllll:                ",
            "    ::::::clooooooooooll:                  ",
            "      ::::::llloooollll:                   ",
            "        :::::::cccc:::                     ",
            "           :::::::                         ",
        ],
        ["blue", "white"],
    ),
    "linux": (
        [
            "        #####           ",
            "       #######          ",
            "       ##O#O##          ",
            "       #######          ",
            "     ###########        ",
            "    #############       ",
            "   ###############      ",
            "   ################     ",
            "  #################     ",
            "#####################   ",
            "#####################   ",
            "  #################     ",
        ],
        ["white", "yellow"],
    ),
    "linux_small": (
        [
            "    ___    ",
            "   (.. |   ",
            "   (<> |   ",
            "  / __  \\  ",
            " ( /  \\ /| ",
            "_/\\ __)/_) ",
            "\\/____\\/   ",
        ],
        ["white"],
    ),
}


def canonical_name(distro_id: str) -> str:
    return ALIASES.get(distro_id, distro_id)


def get_logo(distro_id: str):
    """(lines, palette) for a full-size logo; unknown ids get the generic penguin."""
    name = canonical_name(distro_id)
    if name.endswith("_small") or name not in LOGOS:
        name = FALLBACK
    return LOGOS[name]


def get_small_logo(distro_id: str):
    name = canonical_name(distro_id) + "_small"
    return LOGOS.get(name, LOGOS[FALLBACK + "_small"])
