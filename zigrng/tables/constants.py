"""Published 256-layer tables for the normal and exponential distributions.

These are the standard Ziggurat tables, with tail boundaries
``r = 3.6541528853610088`` (normal, 31 magnitude bits) and
``r = 7.69711747013104972`` (exponential, 32 magnitude bits), laid out the
same way ``build_table`` lays out its tables: ``x`` and ``y`` hold ``n + 1``
boundaries, ``k`` and ``w`` one entry per layer.

They serve as a reference to validate freshly built tables against.
"""

import numpy as np

NORMAL_R = 3.6541528853610088
NORMAL_V = 0.0049286732339746571
NORMAL_BITS = 31

EXPONENTIAL_R = 7.69711747013104972
EXPONENTIAL_V = 0.0039496598225815562
EXPONENTIAL_BITS = 32

NORMAL_X = [
    3.9107579595249158,
    3.6541528853610088,
    3.4492782985614312,
    3.3202447338398255,
    3.2245750520478018,
    3.1478892895180008,
    3.0835261320021434,
    3.0278377917695938,
    2.9786032798818436,
    2.9343668672088881,
    2.8941210536134125,
    2.857138730873225,
    2.8228773968264433,
    2.7909211740019275,
    2.7609440052799865,
    2.7326853590440114,
    2.705933656123062,
    2.6805146432857447,
    2.6562830375767428,
    2.6331163936315822,
    2.6109105184888231,
    2.5895759867082861,
    2.5690354526818435,
    2.5492215503247828,
    2.5300752321598536,
    2.5115444416266937,
    2.4935830412710458,
    2.4761499396705222,
    2.459208374334704,
    2.4427253182003632,
    2.4266709849371457,
    2.4110184139011186,
    2.3957431197819266,
    2.3808227951720848,
    2.3662370567172903,
    2.3519672273791441,
    2.337996148796528,
    2.324308018871132,
    2.3108882506013715,
    2.297723348902863,
    2.2848008027244915,
    2.2721089902283813,
    2.2596370951737872,
    2.2473750329473887,
    2.2353133849299205,
    2.2234433400925098,
    2.21175664288416,
    2.2002455466112756,
    2.1889027716263598,
    2.1777214677402918,
    2.1666951803543073,
    2.1558178198767362,
    2.1450836340478876,
    2.1344871828460157,
    2.1240233156895223,
    2.1136871506866517,
    2.1034740557148757,
    2.0933796311387902,
    2.0833996939983028,
    2.0735302635187414,
    2.0637675478117306,
    2.0541079316506505,
    2.04454796521753,
    2.0350843537296175,
    2.0257139478638528,
    2.0164337349062027,
    2.0072408305605274,
    1.9981324713584183,
    1.9891060076174367,
    1.9801588969004753,
    1.9712886979336579,
    1.9624930649443617,
    1.9537697423846454,
    1.9451165600086768,
    1.9365314282756931,
    1.928012334052664,
    1.9195573365931864,
    1.9111645637712515,
    1.9028322085504275,
    1.8945585256707029,
    1.886341828536781,
    1.8781804862929941,
    1.870072921071265,
    1.8620176053996724,
    1.8540130597602003,
    1.8460578502851839,
    1.8381505865828049,
    1.8302899196827553,
    1.8224745400938844,
    1.8147031759662813,
    1.8069745913508195,
    1.7992875845497187,
    1.791640986552161,
    1.7840336595494399,
    1.7764644955245215,
    1.7689324149112673,
    1.7614363653189091,
    1.7539753203176704,
    1.7465482782817214,
    1.7391542612859108,
    1.7317923140529623,
    1.7244615029480441,
    1.7171609150178224,
    1.7098896570713011,
    1.7026468547999223,
    1.6954316519345607,
    1.6882432094371944,
    1.681080704725173,
    1.6739433309261242,
    1.6668302961616648,
    1.6597408228581818,
    1.6526741470830553,
    1.6456295179047817,
    1.638606196775547,
    1.6316034569348727,
    1.624620582833034,
    1.6176568695730149,
    1.6107116223698297,
    1.6037841560260941,
    1.5968737944227878,
    1.5899798700241905,
    1.5831017233960289,
    1.5762387027359059,
    1.5693901634151233,
    1.5625554675310445,
    1.5557339834691761,
    1.5489250854741732,
    1.5421281532290017,
    1.5353425714415139,
    1.528567729437712,
    1.5218030207609978,
    1.5150478427767144,
    1.5083015962813113,
    1.5015636851154637,
    1.4948335157804935,
    1.4881104970574472,
    1.4813940396281871,
    1.4746835556978553,
    1.4679784586180793,
    1.4612781625102753,
    1.4545820818884101,
    1.4478896312805758,
    1.4412002248487237,
    1.4345132760058918,
    1.4278281970302555,
    1.4211443986753085,
    1.4144612897754707,
    1.4077782768463982,
    1.4010947636792503,
    1.3944101509281404,
    1.3877238356899755,
    1.3810352110758548,
    1.3743436657731656,
    1.3676485835974754,
    1.3609493430332822,
    1.354245316762634,
    1.3475358711805863,
    1.3408203658964031,
    1.334098153219359,
    1.3273685776279247,
    1.3206309752210552,
    1.3138846731502194,
    1.30712898903073,
    1.3003632303308361,
    1.2935866937369467,
    1.2867986644932425,
    1.2799984157138169,
    1.2731852076653554,
    1.2663582870182284,
    1.2595168860637131,
    1.2526602218948961,
    1.2457874955486261,
    1.2388978911056863,
    1.231990574746135,
    1.2250646937565297,
    1.2181193754854807,
    1.2111537262436982,
    1.2041668301443804,
    1.1971577478794404,
    1.190125515426691,
    1.1830691426826856,
    1.1759876120154509,
    1.1688798767308322,
    1.1617448594456106,
    1.1545814503599268,
    1.1473885054208481,
    1.1401648443681505,
    1.132909248652533,
    1.1256204592155323,
    1.1182971741193437,
    1.1109380460135743,
    1.1035416794246382,
    1.09610662785202,
    1.0886313906539782,
    1.0811144097034022,
    1.0735540657924345,
    1.0659486747621207,
    1.0582964833306734,
    1.0505956645909282,
    1.0428443131441474,
    1.0350404398334394,
    1.0271819660356445,
    1.019266717465483,
    1.0112924174399947,
    1.003256679544672,
    0.99515699963509008,
    0.98699074709906154,
    0.97875515529422374,
    0.97044731106422355,
    0.96206414322303968,
    0.95360240988108524,
    0.94505868446816454,
    0.93642934028657421,
    0.92771053340199916,
    0.91889818364958964,
    0.90998795349671757,
    0.9009752244612208,
    0.89185507073294046,
    0.88262222958516456,
    0.87327106808885968,
    0.86379554555330784,
    0.85418917100816283,
    0.84444495490915294,
    0.83455535408638104,
    0.82451220875229114,
    0.81430667013521418,
    0.80392911698997016,
    0.79336905884062225,
    0.78261502330723198,
    0.77165442422456687,
    0.76047340643010686,
    0.74905666201781407,
    0.73738721143429442,
    0.72544614090999848,
    0.71321228519097479,
    0.70066184110681384,
    0.68776789279578721,
    0.67449982283729248,
    0.66082257424441826,
    0.64669571489499222,
    0.63207223638605947,
    0.61689699000774956,
    0.60110461775599078,
    0.58461676610637747,
    0.5673382570538168,
    0.54915170232716304,
    0.52990972066155595,
    0.50942332960208958,
    0.48744396613923352,
    0.4636343367908794,
    0.43751840220786858,
    0.40838913461198767,
    0.37512133287837662,
    0.33573751921442047,
    0.28617459179206622,
    0.21524189598487156,
    0.0,
]

NORMAL_Y = [
    0.0,
    0.001260285930498598,
    0.002609072746102164,
    0.0040379725933630305,
    0.0055224032992509916,
    0.0070508754713732224,
    0.0086165827693987264,
    0.010214971439701459,
    0.011842757857907879,
    0.013497450601739867,
    0.015177088307935309,
    0.016880083152543142,
    0.018605121275724622,
    0.02035109623004451,
    0.02211706270730885,
    0.023902203305795879,
    0.02570580400854891,
    0.027527235669603113,
    0.029365939758133359,
    0.0312214171919203,
    0.033093219458578578,
    0.034980941461716125,
    0.036884215688567305,
    0.038802707404526147,
    0.040736110655940988,
    0.042684144916474522,
    0.044646552251294561,
    0.046623094901930486,
    0.048613553215868653,
    0.050617723860947893,
    0.052635418276792308,
    0.054666461324889046,
    0.056710690106203006,
    0.058767952920933869,
    0.060838108349539961,
    0.062921024437758225,
    0.065016577971242953,
    0.067124653827788566,
    0.069245144397006825,
    0.071377949058890472,
    0.073522973713981379,
    0.075680130358927178,
    0.077849336702096122,
    0.080030515814663153,
    0.082223595813202988,
    0.084428509570353541,
    0.086645194450558141,
    0.088873592068275969,
    0.091113648066373829,
    0.093365311912691096,
    0.095628536713009082,
    0.09790327903886259,
    0.1001894987688101,
    0.10248715894193534,
    0.10479622562248721,
    0.107116667774684,
    0.10944845714681205,
    0.11179156816383844,
    0.11414597782783878,
    0.11651166562561123,
    0.11888861344291038,
    0.12127680548479063,
    0.1236762282015969,
    0.12608687022018628,
    0.1285087222799999,
    0.13094177717364472,
    0.13338602969166952,
    0.13584147657125412,
    0.13830811644855109,
    0.14078594981444506,
    0.14327497897351382,
    0.14577520800599442,
    0.14828664273257494,
    0.15080929068184615,
    0.1533431610602633,
    0.15588826472447975,
    0.15844461415592484,
    0.16101222343751165,
    0.16359110823236628,
    0.16618128576448263,
    0.16878277480121209,
    0.1713955956375065,
    0.17401977008183936,
    0.17665532144373555,
    0.17930227452284822,
    0.18196065559952312,
    0.18463049242679985,
    0.1873118142238008,
    0.19000465167046546,
    0.19270903690358965,
    0.1954250035141348,
    0.19815258654577567,
    0.20089182249465717,
    0.20364274931033544,
    0.20640540639788124,
    0.20917983462112549,
    0.2119660763070306,
    0.214764175251174,
    0.21757417672433152,
    0.22039612748015233,
    0.22323007576391782,
    0.22607607132238053,
    0.22893416541468053,
    0.23180441082433889,
    0.23468686187233026,
    0.23758157443123834,
    0.24048860594050084,
    0.24340801542275048,
    0.24633986350126399,
    0.24928421241852858,
    0.25224112605594223,
    0.25521066995466196,
    0.25819291133761924,
    0.26118791913272121,
    0.26419576399726119,
    0.26721651834356147,
    0.27025025636587546,
    0.27329705406857707,
    0.27635698929566832,
    0.27943014176163794,
    0.28251659308370758,
    0.28561642681550176,
    0.28872972848218292,
    0.29185658561709521,
    0.29499708779996181,
    0.29815132669668548,
    0.30131939610080305,
    0.30450139197664999,
    0.30769741250429206,
    0.31090755812628651,
    0.31413193159633718,
    0.31737063802991361,
    0.32062378495690536,
    0.32389148237639109,
    0.3271738428136014,
    0.33047098137916359,
    0.33378301583071845,
    0.33711006663700605,
    0.34045225704452187,
    0.34380971314685072,
    0.34718256395679364,
    0.35057094148140611,
    0.35397498080007678,
    0.3573948201457805,
    0.36083060098964803,
    0.36428246812900406,
    0.36775056977903259,
    0.37123505766823955,
    0.37473608713789125,
    0.37825381724561929,
    0.38178841087339377,
    0.38534003484007745,
    0.38890886001878894,
    0.39249506145931584,
    0.39609881851583273,
    0.39972031498019756,
    0.40335973922111484,
    0.40701728432947376,
    0.41069314827018866,
    0.41438753404089163,
    0.41810064983784861,
    0.42183270922949634,
    0.42558393133802241,
    0.42935454102944193,
    0.43314476911265276,
    0.43695485254798599,
    0.44078503466580438,
    0.44463556539573978,
    0.4485067015072034,
    0.45239870686184896,
    0.45631185267871677,
    0.4602464178128432,
    0.46420268904817463,
    0.46818096140569387,
    0.47218153846773042,
    0.47620473271950614,
    0.48025086590904703,
    0.4843202694266836,
    0.48841328470545831,
    0.49253026364386882,
    0.4966715690524901,
    0.50083757512614913,
    0.50502866794346846,
    0.50924524599574816,
    0.51348772074732718,
    0.51775651722975646,
    0.52205207467232195,
    0.52637484717168459,
    0.53072530440366228,
    0.53510393238045795,
    0.53951123425695258,
    0.54394773119002671,
    0.54841396325526637,
    0.55291049042583296,
    0.55743789361876661,
    0.56199677581452512,
    0.566587763256165,
    0.57121150673525378,
    0.57586868297235427,
    0.58055999610079145,
    0.58528617926337179,
    0.59004799633282623,
    0.59484624376798767,
    0.5996817526191256,
    0.604555390697468,
    0.60946806492577366,
    0.61442072388891411,
    0.61941436060583455,
    0.62445001554702673,
    0.62952877992483691,
    0.63465179928762383,
    0.63982027745305681,
    0.64503548082082263,
    0.65029874311081703,
    0.6556114705796976,
    0.66097514777666344,
    0.66639134390875043,
    0.67186171989708243,
    0.67738803621877375,
    0.68297216164499508,
    0.68861608300467203,
    0.69432191612611693,
    0.70009191813651184,
    0.70592850133275453,
    0.71183424887824864,
    0.71781193263072218,
    0.72386453346863044,
    0.72999526456147645,
    0.73620759812686298,
    0.74250529634015139,
    0.74889244721915715,
    0.75537350650709645,
    0.7619533468367955,
    0.76863731579848649,
    0.7754313049811874,
    0.78234183265480273,
    0.78937614356602492,
    0.7965423304229593,
    0.80384948317096472,
    0.81130787431265672,
    0.81892919160370292,
    0.82672683394622204,
    0.8347162929868841,
    0.84291565311220484,
    0.85134625845867862,
    0.8600336211963322,
    0.86900868803685771,
    0.87830965580891807,
    0.88798466075583415,
    0.89809592189834431,
    0.90872644005213177,
    0.91999150503934801,
    0.93206007595923157,
    0.94519895344230087,
    0.95987909180010811,
    0.97710170126767337,
    1.0,
]

NORMAL_K = [
    2006576129,
    2027082329,
    2067148735,
    2085605957,
    2096412912,
    2103575233,
    2108700192,
    2112564238,
    2115590520,
    2118030198,
    2120042178,
    2121732131,
    2123173181,
    2124417615,
    2125503853,
    2126460794,
    2127310605,
    2128070593,
    2128754473,
    2129373262,
    2129935915,
    2130449793,
    2130920999,
    2131354643,
    2131755036,
    2132125841,
    2132470191,
    2132790783,
    2133089953,
    2133369732,
    2133631897,
    2133878009,
    2134109445,
    2134327425,
    2134533032,
    2134727236,
    2134910900,
    2135084803,
    2135249646,
    2135406059,
    2135554616,
    2135695837,
    2135830193,
    2135958116,
    2136079999,
    2136196204,
    2136307060,
    2136412872,
    2136513920,
    2136610461,
    2136702734,
    2136790959,
    2136875341,
    2136956068,
    2137033317,
    2137107252,
    2137178024,
    2137245776,
    2137310640,
    2137372740,
    2137432192,
    2137489104,
    2137543577,
    2137595707,
    2137645582,
    2137693288,
    2137738901,
    2137782497,
    2137824145,
    2137863911,
    2137901856,
    2137938038,
    2137972513,
    2138005331,
    2138036543,
    2138066193,
    2138094325,
    2138120981,
    2138146199,
    2138170015,
    2138192464,
    2138213578,
    2138233389,
    2138251924,
    2138269213,
    2138285279,
    2138300149,
    2138313843,
    2138326385,
    2138337794,
    2138348089,
    2138357289,
    2138365409,
    2138372465,
    2138378473,
    2138383445,
    2138387394,
    2138390332,
    2138392270,
    2138393217,
    2138393183,
    2138392176,
    2138390203,
    2138387271,
    2138383387,
    2138378555,
    2138372779,
    2138366064,
    2138358413,
    2138349827,
    2138340310,
    2138329861,
    2138318482,
    2138306171,
    2138292929,
    2138278753,
    2138263642,
    2138247593,
    2138230602,
    2138212664,
    2138193777,
    2138173933,
    2138153128,
    2138131354,
    2138108604,
    2138084870,
    2138060144,
    2138034416,
    2138007676,
    2137979913,
    2137951117,
    2137921274,
    2137890371,
    2137858396,
    2137825333,
    2137791167,
    2137755882,
    2137719460,
    2137681885,
    2137643137,
    2137603196,
    2137562041,
    2137519651,
    2137476004,
    2137431074,
    2137384838,
    2137337268,
    2137288338,
    2137238019,
    2137186281,
    2137133092,
    2137078421,
    2137022232,
    2136964491,
    2136905159,
    2136844198,
    2136781567,
    2136717223,
    2136651121,
    2136583215,
    2136513457,
    2136441795,
    2136368175,
    2136292542,
    2136214838,
    2136135001,
    2136052967,
    2135968669,
    2135882036,
    2135792995,
    2135701468,
    2135607374,
    2135510628,
    2135411139,
    2135308815,
    2135203556,
    2135095257,
    2134983810,
    2134869099,
    2134751003,
    2134629393,
    2134504136,
    2134375087,
    2134242096,
    2134105006,
    2133963646,
    2133817840,
    2133667399,
    2133512122,
    2133351798,
    2133186202,
    2133015094,
    2132838220,
    2132655310,
    2132466074,
    2132270205,
    2132067374,
    2131857230,
    2131639397,
    2131413473,
    2131179025,
    2130935589,
    2130682668,
    2130419725,
    2130146180,
    2129861409,
    2129564737,
    2129255432,
    2128932701,
    2128595682,
    2128243438,
    2127874944,
    2127489085,
    2127084637,
    2126660259,
    2126214478,
    2125745668,
    2125252036,
    2124731596,
    2124182143,
    2123601223,
    2122986094,
    2122333688,
    2121640556,
    2120902807,
    2120116040,
    2119275250,
    2118374729,
    2117407931,
    2116367319,
    2115244161,
    2114028295,
    2112707816,
    2111268685,
    2109694235,
    2107964522,
    2106055480,
    2103937798,
    2101575410,
    2098923436,
    2095925310,
    2092508730,
    2088579772,
    2084014179,
    2078644065,
    2072236970,
    2064461600,
    2054829227,
    2042587919,
    2026518615,
    2004507659,
    1972547406,
    1922020342,
    1830463445,
    1615197383,
    0,
]

NORMAL_W = [
    1.8210885857813599e-09,
    1.7015975366164971e-09,
    1.6061953727907646e-09,
    1.5461094369365953e-09,
    1.5015597697569997e-09,
    1.465850178859197e-09,
    1.435878748075172e-09,
    1.4099468438744516e-09,
    1.3870202376888337e-09,
    1.3664210528176688e-09,
    1.3476801354500523e-09,
    1.3304588994352263e-09,
    1.3145047225181215e-09,
    1.2996239466601645e-09,
    1.2856647396832642e-09,
    1.272505782099446e-09,
    1.2600485496796025e-09,
    1.2482118994396854e-09,
    1.236928178731698e-09,
    1.2261403694895945e-09,
    1.2157999530848223e-09,
    1.2058652875517896e-09,
    1.1963003560350479e-09,
    1.1870737887568692e-09,
    1.1781580895929847e-09,
    1.1695290178184834e-09,
    1.1611650890070227e-09,
    1.1530471684739563e-09,
    1.145158137350671e-09,
    1.1374826162123881e-09,
    1.1300067347181708e-09,
    1.1227179383398586e-09,
    1.1156048252163113e-09,
    1.1086570076514431e-09,
    1.1018649939062495e-09,
    1.0952200868069865e-09,
    1.0887142963691279e-09,
    1.0823402641672325e-09,
    1.0760911975993642e-09,
    1.0699608125271569e-09,
    1.0639432830384427e-09,
    1.0580331972932356e-09,
    1.0522255185869463e-09,
    1.046515550905554e-09,
    1.0408989083626869e-09,
    1.0353714880032976e-09,
    1.0299294455368817e-09,
    1.024569173628127e-09,
    1.0192872824270091e-09,
    1.0140805820656437e-09,
    1.008946066887261e-09,
    1.0038809012047649e-09,
    9.988824064135028e-10,
    9.9394804930594549e-10,
    9.890754314556356e-10,
    9.8426227955457368e-10,
    9.7950643660262025e-10,
    9.7480585385988942e-10,
    9.7015858348379975e-10,
    9.6556277178169292e-10,
    9.6101665301794678e-10,
    9.5651854372147961e-10,
    9.5206683744561394e-10,
    9.4765999993757228e-10,
    9.4329656467952432e-10,
    9.38975128767175e-10,
    9.3469434909547091e-10,
    9.3045293882415552e-10,
    9.2624966409869339e-10,
    9.2208334100454827e-10,
    9.179528327349843e-10,
    9.1385704695450222e-10,
    9.0979493334174408e-10,
    9.0576548129724191e-10,
    9.017677178027542e-10,
    8.9780070542016254e-10,
    8.9386354041899852e-10,
    8.8995535102265493e-10,
    8.8607529576422062e-10,
    8.822225619436721e-10,
    8.783963641788722e-10,
    8.7459594304347134e-10,
    8.7082056378538953e-10,
    8.6706951512008553e-10,
    8.6334210809329537e-10,
    8.5963767500835651e-10,
    8.5595556841362498e-10,
    8.5229516014585054e-10,
    8.4865584042569829e-10,
    8.4503701700190142e-10,
    8.414381143407987e-10,
    8.3785857285825476e-10,
    8.3429784819118724e-10,
    8.3075541050612923e-10,
    8.2723074384244227e-10,
    8.2372334548796867e-10,
    8.2023272538506851e-10,
    8.1675840556513073e-10,
    8.1329991960978202e-10,
    8.0985681213713753e-10,
    8.0642863831155109e-10,
    8.0301496337542502e-10,
    7.9961536220173464e-10,
    7.9622941886601091e-10,
    7.9285672623660522e-10,
    7.8949688558213445e-10,
    7.8614950619507321e-10,
    7.8281420503052558e-10,
    7.7949060635926399e-10,
    7.761783414341811e-10,
    7.7287704816934737e-10,
    7.6958637083091553e-10,
    7.6630595973915501e-10,
    7.6303547098093991e-10,
    7.5977456613205035e-10,
    7.5652291198868026e-10,
    7.5328018030757779e-10,
    7.5004604755427208e-10,
    7.4682019465886715e-10,
    7.4360230677890953e-10,
    7.4039207306885649e-10,
    7.371891864556954e-10,
    7.3399334342028291e-10,
    7.3080424378398958e-10,
    7.2762159050025254e-10,
    7.244450894506537e-10,
    7.2127444924515354e-10,
    7.1810938102612349e-10,
    7.1494959827582998e-10,
    7.1179481662703306e-10,
    7.086447536763725e-10,
    7.054991288002182e-10,
    7.0235766297267346e-10,
    6.9922007858541965e-10,
    6.9608609926909837e-10,
    6.9295544971593062e-10,
    6.8982785550327369e-10,
    6.8670304291781748e-10,
    6.8358073878012565e-10,
    6.8046067026922261e-10,
    6.7734256474692845e-10,
    6.7422614958164086e-10,
    6.7111115197125994e-10,
    6.6799729876494587e-10,
    6.6488431628339716e-10,
    6.6177193013732718e-10,
    6.5865986504381089e-10,
    6.5554784464016474e-10,
    6.5243559129501243e-10,
    6.4932282591617683e-10,
    6.4620926775502762e-10,
    6.4309463420689796e-10,
    6.3997864060716963e-10,
    6.3686100002260666e-10,
    6.3374142303750021e-10,
    6.3061961753416529e-10,
    6.274952884673077e-10,
    6.2436813763175303e-10,
    6.2123786342300427e-10,
    6.1810416059006225e-10,
    6.1496671997991168e-10,
    6.118252282730394e-10,
    6.0867936770931354e-10,
    6.055288158035074e-10,
    6.0237324504970884e-10,
    5.9921232261380299e-10,
    5.9604571001316276e-10,
    5.9287306278262072e-10,
    5.8969403012573178e-10,
    5.8650825455026382e-10,
    5.8331537148677563e-10,
    5.8011500888905773e-10,
    5.7690678681511724e-10,
    5.7369031698728681e-10,
    5.7046520232992699e-10,
    5.6723103648306833e-10,
    5.6398740329020573e-10,
    5.6073387625831199e-10,
    5.5747001798797418e-10,
    5.5419537957137962e-10,
    5.5090949995568283e-10,
    5.4761190526906907e-10,
    5.4430210810659088e-10,
    5.4097960677259162e-10,
    5.3764388447624015e-10,
    5.3429440847637511e-10,
    5.3093062917150113e-10,
    5.2755197913038216e-10,
    5.241578720582334e-10,
    5.2074770169302062e-10,
    5.1732084062582546e-10,
    5.1387663903862155e-10,
    5.104144233521167e-10,
    5.0693349477554587e-10,
    5.0343312774943291e-10,
    4.9991256827136246e-10,
    4.9637103209370782e-10,
    4.9280770278101479e-10,
    4.892217296133415e-10,
    4.8561222532025882e-10,
    4.8197826362840804e-10,
    4.7831887660345272e-10,
    4.7463305176491059e-10,
    4.7091972894966353e-10,
    4.6717779689686001e-10,
    4.6340608952338345e-10,
    4.5960338185497631e-10,
    4.5576838557339448e-10,
    4.5189974413450041e-10,
    4.4799602740585789e-10,
    4.4405572576498857e-10,
    4.4007724359080407e-10,
    4.3605889207058316e-10,
    4.3199888123292437e-10,
    4.2789531110301131e-10,
    4.2374616185981667e-10,
    4.1954928285499141e-10,
    4.153023803294359e-10,
    4.1100300363505472e-10,
    4.0664852973486282e-10,
    4.0223614571304426e-10,
    3.9776282897599173e-10,
    3.9322532476352199e-10,
    3.8862012051343035e-10,
    3.8394341652853933e-10,
    3.7919109227844243e-10,
    3.7435866752172362e-10,
    3.6944125724985369e-10,
    3.6443351921962201e-10,
    3.5932959254112415e-10,
    3.5412302540154516e-10,
    3.4880668950165346e-10,
    3.4337267812075765e-10,
    3.378121838485815e-10,
    3.3211535084572378e-10,
    3.2627109489720959e-10,
    3.2026688232821748e-10,
    3.1408845579125568e-10,
    3.0771949060466991e-10,
    3.0114115909440081e-10,
    2.9433157126701412e-10,
    2.8726504650327822e-10,
    2.7991115011088121e-10,
    2.7223339588678324e-10,
    2.6418746311860941e-10,
    2.5571868863290317e-10,
    2.4675844268014466e-10,
    2.3721872344710379e-10,
    2.2698378476278555e-10,
    2.1589656211011084e-10,
    2.0373538239294131e-10,
    1.9017101014591179e-10,
    1.7467948276473983e-10,
    1.5633996539489388e-10,
    1.3326042880866035e-10,
    1.0022981836687381e-10,
]


EXPONENTIAL_X = [
    8.697117470131051,
    7.6971174701310501,
    6.9410336293772126,
    6.4783784938325697,
    6.1441646657724727,
    5.8821443157953999,
    5.6664101674540337,
    5.4828906275260625,
    5.323090505754398,
    5.1814872813015,
    5.0542884899813041,
    4.9387770859012505,
    4.832939741025112,
    4.7352429966017411,
    4.6444918854200852,
    4.5597370617073514,
    4.4802117465284219,
    4.4052876934735732,
    4.334443680317273,
    4.2672424802773659,
    4.2033137137351844,
    4.1423408656640515,
    4.0840513104082978,
    4.0282085446479368,
    3.9746060666737888,
    3.9230625001354897,
    3.8734176703995091,
    3.8255294185223367,
    3.7792709924116679,
    3.7345288940397974,
    3.6912010902374188,
    3.6491955157608538,
    3.6084288131289095,
    3.568825265648337,
    3.5303158891293434,
    3.4928376547740596,
    3.4563328211327602,
    3.4207483572511199,
    3.386035442460301,
    3.3521490309001094,
    3.319047470970748,
    3.2866921715990687,
    3.2550473085704499,
    3.2240795652862642,
    3.1937579032122403,
    3.1640533580259729,
    3.1349388580844404,
    3.1063890623398245,
    3.0783802152540902,
    3.0508900166154551,
    3.0238975044556766,
    2.9973829495161306,
    2.9713277599210897,
    2.9457143948950457,
    2.9205262865127408,
    2.8957477686001418,
    2.8713640120155364,
    2.8473609656351888,
    2.8237253024500353,
    2.8004443702507378,
    2.7775061464397566,
    2.7548991965623446,
    2.7326126361947001,
    2.7106360958679288,
    2.6889596887418037,
    2.6675739807732666,
    2.6464699631518092,
    2.6256390267977885,
    2.6050729387408356,
    2.5847638202141408,
    2.5647041263169053,
    2.54488662711187,
    2.525304390037828,
    2.505950763528594,
    2.4868193617402095,
    2.4679040502973648,
    2.4491989329782498,
    2.4306983392644197,
    2.4123968126888706,
    2.3942890999214579,
    2.3763701405361406,
    2.3586350574093373,
    2.3410791477030344,
    2.3236978743901964,
    2.3064868582835798,
    2.2894418705322694,
    2.2725588255531548,
    2.2558337743672192,
    2.239262898312909,
    2.2228425031110368,
    2.2065690132576639,
    2.19043896672322,
    2.1744490099377747,
    2.158595893043886,
    2.142876465399842,
    2.1272876713173683,
    2.1118265460190422,
    2.096490211801715,
    2.0812758743932251,
    2.0661808194905755,
    2.0512024094685848,
    2.0363380802487696,
    2.0215853383189262,
    2.0069417578945186,
    1.9924049782135766,
    1.9779727009573604,
    1.9636426877895483,
    1.9494127580071849,
    1.9352807862970514,
    1.9212447005915281,
    1.9073024800183875,
    1.8934521529393082,
    1.8796917950722112,
    1.866019527692828,
    1.8524335159111756,
    1.83893196701888,
    1.8255131289035198,
    1.8121752885263906,
    1.7989167704602909,
    1.785735935484126,
    1.7726311792313056,
    1.7596009308890748,
    1.7466436519460744,
    1.7337578349855716,
    1.7209420025219353,
    1.7081947058780578,
    1.6955145241015379,
    1.6829000629175539,
    1.6703499537164521,
    1.6578628525741728,
    1.6454374393037237,
    1.6330724165359913,
    1.6207665088282579,
    1.6085184617988584,
    1.5963270412864834,
    1.5841910325326889,
    1.5721092393862297,
    1.5600804835278881,
    1.5481036037145135,
    1.5361774550410321,
    1.5243009082192263,
    1.5124728488721171,
    1.5006921768428167,
    1.4889578055167461,
    1.4772686611561339,
    1.4656236822457454,
    1.4540218188487934,
    1.4424620319720125,
    1.4309432929388797,
    1.4194645827699832,
    1.4080248915695357,
    1.3966232179170421,
    1.3852585682631222,
    1.3739299563284908,
    1.362636402505087,
    1.3513769332583354,
    1.3401505805295051,
    1.328956381137117,
    1.3177933761763252,
    1.3066606104151746,
    1.2955571316866015,
    1.2844819902750131,
    1.2734342382962416,
    1.2624129290696158,
    1.251417116480853,
    1.240445854334407,
    1.2294981956938498,
    1.218573192208791,
    1.2076698934267622,
    1.196787346088404,
    1.1859245934042031,
    1.1750806743109123,
    1.1642546227056796,
    1.1534454666557754,
    1.1426522275816735,
    1.1318739194110792,
    1.1211095477013311,
    1.1103581087274119,
    1.0996185885325982,
    1.0888899619385479,
    1.0781711915113732,
    1.0674612264799688,
    1.0567590016025523,
    1.0460634359770451,
    1.0353734317905294,
    1.0246878730026183,
    1.0140056239570978,
    1.0033255279156981,
    0.99264640550727723,
    0.98196705308506393,
    0.97128624098390481,
    0.96060271166866795,
    0.94991517776407741,
    0.93922231995526384,
    0.92852278474721195,
    0.91781518207004575,
    0.90709808271569181,
    0.89637001558989149,
    0.88562946476175308,
    0.87487486629102673,
    0.86410460481100604,
    0.85331700984237491,
    0.84251035181037004,
    0.83168283773427465,
    0.82083260655441337,
    0.80995772405741995,
    0.79905617735548873,
    0.7881258688694941,
    0.77716460975913126,
    0.76617011273543623,
    0.7551399841819838,
    0.74407171550050955,
    0.73296267358436695,
    0.72181009030875776,
    0.71061105090965648,
    0.6993624811032334,
    0.68806113277374936,
    0.67670356802952414,
    0.66528614139267939,
    0.6538049798476665,
    0.64225596042453792,
    0.63063468493349195,
    0.61893645139487774,
    0.60715622162030169,
    0.59528858429150444,
    0.58332771274877115,
    0.57126731653258989,
    0.55910058551154218,
    0.54682012516331213,
    0.53441788123716705,
    0.52188505159213661,
    0.50921198244365595,
    0.4963880455186726,
    0.4834014916534633,
    0.47023927508217045,
    0.45688684093142179,
    0.44332786607355412,
    0.42954394022541259,
    0.41551416960035825,
    0.4012146788962796,
    0.3866179779411214,
    0.37169214532991918,
    0.3563997602583957,
    0.34069648106485118,
    0.32452911701691145,
    0.30783295467493427,
    0.29052795549123261,
    0.27251318547846703,
    0.25365836338591446,
    0.23379048305967726,
    0.21267151063096923,
    0.18995868962243467,
    0.16512762256419042,
    0.13730498094001628,
    0.10483850756582322,
    0.063852163815007607,
    0.0,
]

EXPONENTIAL_Y = [
    0.0,
    0.0004541343538414966,
    0.00096726928232717432,
    0.0015362997803015726,
    0.0021459677437189071,
    0.0027887987935740757,
    0.003460264777836904,
    0.004157295120833797,
    0.0048776559835423958,
    0.0056196422072054891,
    0.0063819059373191834,
    0.0071633531836349908,
    0.0079630774380170435,
    0.008780314985808977,
    0.0096144136425022116,
    0.010464810181029981,
    0.0113310135978346,
    0.012212592426255378,
    0.013109164931254991,
    0.014020391403181943,
    0.014945968011691148,
    0.015885621839973156,
    0.016839106826039941,
    0.017806200410911355,
    0.018786700744696024,
    0.01978042433800974,
    0.020787204072578114,
    0.021806887504283581,
    0.02283933540638524,
    0.023884420511558174,
    0.024942026419731787,
    0.026012046645134221,
    0.027094383780955803,
    0.028188948763978646,
    0.029295660224637411,
    0.030414443910466622,
    0.031545232172893622,
    0.032687963508959555,
    0.033842582150874358,
    0.035009037697397431,
    0.036187284781931443,
    0.037377282772959382,
    0.038578995503074871,
    0.039792391023374139,
    0.04101744138041484,
    0.042254122413316254,
    0.043502413568888197,
    0.044762297732943289,
    0.046033761076175184,
    0.047316792913181561,
    0.048611385573379504,
    0.049917534282706379,
    0.051235237055126281,
    0.052564494593071685,
    0.05390531019604608,
    0.05525768967669703,
    0.05662164128374287,
    0.057997175631200659,
    0.05938430563342028,
    0.06078304644547966,
    0.062193415408541036,
    0.063615431999807376,
    0.065049117786753805,
    0.066494496385339816,
    0.067951593421936643,
    0.069420436498728783,
    0.070901055162371843,
    0.072393480875708752,
    0.073897746992364746,
    0.07541388873405841,
    0.076941943170480517,
    0.078481949201606435,
    0.080033947542319905,
    0.081597980709237419,
    0.083174093009632397,
    0.084762330532368146,
    0.086362741140756927,
    0.087975374467270231,
    0.089600281910032886,
    0.091237516631040197,
    0.092887133556043569,
    0.094549189376055873,
    0.096223742550432825,
    0.097910853311492213,
    0.099610583670637132,
    0.10132299742595363,
    0.1030481601712577,
    0.10478613930657016,
    0.10653700405000163,
    0.10830082545103376,
    0.11007767640518536,
    0.11186763167005628,
    0.11367076788274429,
    0.11548716357863351,
    0.11731689921155553,
    0.11916005717532764,
    0.12101672182667479,
    0.12288697950954511,
    0.12477091858083093,
    0.12666862943751067,
    0.1285802045452282,
    0.13050573846833077,
    0.13244532790138749,
    0.1343990717022136,
    0.13636707092642883,
    0.13834942886358018,
    0.1403462510748624,
    0.14235764543247215,
    0.14438372216063472,
    0.14642459387834489,
    0.14848037564386674,
    0.15055118500103984,
    0.1526371420274428,
    0.15473836938446803,
    0.15685499236936515,
    0.15898713896931413,
    0.16113493991759195,
    0.16329852875190173,
    0.16547804187493592,
    0.16767361861725008,
    0.16988540130252755,
    0.17211353531531998,
    0.17435816917135341,
    0.17661945459049483,
    0.17889754657247828,
    0.18119260347549626,
    0.18350478709776744,
    0.18583426276219708,
    0.18818119940425426,
    0.19054576966319536,
    0.1929281499767713,
    0.19532852067956319,
    0.19774706610509882,
    0.20018397469191121,
    0.20263943909370896,
    0.20511365629383765,
    0.20760682772422198,
    0.21011915938898823,
    0.21265086199297822,
    0.21520215107537863,
    0.21777324714870047,
    0.22036437584335944,
    0.22297576805812011,
    0.22560766011668396,
    0.22826029393071662,
    0.23093391716962736,
    0.23362878343743329,
    0.23634515245705956,
    0.23908329026244909,
    0.24184346939887713,
    0.24462596913189202,
    0.24743107566532754,
    0.25025908236886218,
    0.25311029001562935,
    0.25598500703041527,
    0.25888354974901606,
    0.26180624268936281,
    0.26475341883506204,
    0.26772541993204463,
    0.27072259679905986,
    0.2737453096528028,
    0.27679392844851719,
    0.27986883323697276,
    0.28297041453878063,
    0.28609907373707671,
    0.28925522348967758,
    0.29243928816189241,
    0.29565170428126097,
    0.29889292101558151,
    0.30216340067569331,
    0.30546361924459003,
    0.30879406693455996,
    0.31215524877417938,
    0.31554768522712873,
    0.31897191284495702,
    0.322428484956089,
    0.32591797239355602,
    0.32944096426413616,
    0.33299806876180876,
    0.33658991402867738,
    0.34021714906677986,
    0.34388044470450224,
    0.34758049462163682,
    0.35131801643748317,
    0.35509375286678729,
    0.35890847294874956,
    0.3627629733548175,
    0.36665807978151388,
    0.37059464843514572,
    0.37457356761590188,
    0.37859575940958051,
    0.3826621814960095,
    0.38677382908413738,
    0.39093173698479677,
    0.39513698183328982,
    0.39939068447523074,
    0.40369401253052994,
    0.40804818315203206,
    0.41245446599716085,
    0.41691418643300254,
    0.42142872899761624,
    0.42599954114303401,
    0.4306281372884585,
    0.43531610321563624,
    0.44006510084235351,
    0.44487687341454812,
    0.44975325116275461,
    0.45469615747461511,
    0.4597076156421373,
    0.46478975625042579,
    0.46994482528395959,
    0.47517519303737699,
    0.48048336393045382,
    0.48587198734188453,
    0.49134386959403215,
    0.49690198724154916,
    0.50254950184134728,
    0.50828977641064244,
    0.51412639381474812,
    0.52006317736823315,
    0.52610421398361928,
    0.53225388026304277,
    0.53851687200286136,
    0.54489823767243917,
    0.55140341654064084,
    0.558038282262587,
    0.56480919291239973,
    0.57172304866482526,
    0.57878735860284447,
    0.58601031847726748,
    0.59340090169173287,
    0.60096896636523167,
    0.60872538207962146,
    0.61668218091520699,
    0.62485273870366531,
    0.6332519942143654,
    0.64189671642726531,
    0.65080583341457021,
    0.66000084107899892,
    0.66950631673192396,
    0.67935057226476459,
    0.6895664961170771,
    0.70019265508278727,
    0.71127476080507501,
    0.72286765959357102,
    0.73503809243142249,
    0.74786862198519399,
    0.76146338884989506,
    0.77595685204011433,
    0.79152763697249429,
    0.80842165152300693,
    0.82699329664304877,
    0.84778550062398783,
    0.87170433238120149,
    0.90046992992574371,
    0.93814368086217081,
    1.0,
]

EXPONENTIAL_K = [
    3801129273,
    3873074895,
    4008685917,
    4073393724,
    4111806704,
    4137444620,
    4155865042,
    4169789475,
    4180713890,
    4189531420,
    4196809522,
    4202926710,
    4208145538,
    4212654085,
    4216590757,
    4220059768,
    4223141146,
    4225897409,
    4228378137,
    4230623176,
    4232664930,
    4234530035,
    4236240596,
    4237815118,
    4239269214,
    4240616155,
    4241867296,
    4243032411,
    4244119963,
    4245137315,
    4246090910,
    4246986404,
    4247828790,
    4248622490,
    4249371435,
    4250079132,
    4250748722,
    4251383021,
    4251984571,
    4252555662,
    4253098370,
    4253614578,
    4254106002,
    4254574202,
    4255020608,
    4255446525,
    4255853155,
    4256241598,
    4256612870,
    4256967906,
    4257307571,
    4257632664,
    4257943926,
    4258242044,
    4258527656,
    4258801357,
    4259063697,
    4259315195,
    4259556329,
    4259787550,
    4260009277,
    4260221905,
    4260425802,
    4260621313,
    4260808763,
    4260988457,
    4261160681,
    4261325704,
    4261483780,
    4261635148,
    4261780032,
    4261918645,
    4262051187,
    4262177846,
    4262298801,
    4262414220,
    4262524261,
    4262629075,
    4262728804,
    4262823581,
    4262913534,
    4262998781,
    4263079437,
    4263155608,
    4263227394,
    4263294892,
    4263358192,
    4263417377,
    4263472530,
    4263523724,
    4263571032,
    4263614520,
    4263654251,
    4263690284,
    4263722676,
    4263751476,
    4263776735,
    4263798497,
    4263816804,
    4263831695,
    4263843206,
    4263851370,
    4263856218,
    4263857776,
    4263856071,
    4263851124,
    4263842955,
    4263831582,
    4263817020,
    4263799282,
    4263778377,
    4263754314,
    4263727099,
    4263696735,
    4263663224,
    4263626565,
    4263586755,
    4263543789,
    4263497660,
    4263448358,
    4263395872,
    4263340187,
    4263281289,
    4263219158,
    4263153776,
    4263085118,
    4263013162,
    4262937878,
    4262859239,
    4262777212,
    4262691764,
    4262602857,
    4262510454,
    4262414513,
    4262314988,
    4262211835,
    4262105003,
    4261994441,
    4261880092,
    4261761900,
    4261639802,
    4261513736,
    4261383632,
    4261249421,
    4261111028,
    4260968374,
    4260821380,
    4260669958,
    4260514019,
    4260353470,
    4260188212,
    4260018142,
    4259843154,
    4259663135,
    4259477966,
    4259287526,
    4259091685,
    4258890309,
    4258683258,
    4258470383,
    4258251531,
    4258026541,
    4257795244,
    4257557464,
    4257313014,
    4257061702,
    4256803325,
    4256537670,
    4256264513,
    4255983622,
    4255694750,
    4255397640,
    4255092022,
    4254777611,
    4254454110,
    4254121205,
    4253778565,
    4253425844,
    4253062674,
    4252688672,
    4252303431,
    4251906522,
    4251497493,
    4251075867,
    4250641138,
    4250192773,
    4249730206,
    4249252839,
    4248760037,
    4248251127,
    4247725394,
    4247182079,
    4246620374,
    4246039419,
    4245438297,
    4244816032,
    4244171579,
    4243503822,
    4242811568,
    4242093539,
    4241348362,
    4240574564,
    4239770563,
    4238934652,
    4238064994,
    4237159604,
    4236216336,
    4235232866,
    4234206673,
    4233135020,
    4232014925,
    4230843138,
    4229616109,
    4228329951,
    4226980400,
    4225562770,
    4224071896,
    4222502074,
    4220846988,
    4219099625,
    4217252177,
    4215295924,
    4213221098,
    4211016720,
    4208670408,
    4206168142,
    4203493986,
    4200629752,
    4197554582,
    4194244443,
    4190671498,
    4186803325,
    4182601930,
    4178022498,
    4173011791,
    4167506077,
    4161428406,
    4154685009,
    4147160435,
    4138710916,
    4129155133,
    4118261130,
    4105727352,
    4091154507,
    4074002619,
    4053523342,
    4028649213,
    3997804264,
    3958562475,
    3906990442,
    3836274812,
    3733536696,
    3571300752,
    3279400049,
    2615860924,
    0,
]

EXPONENTIAL_W = [
    2.0249554585039269e-09,
    1.792124814850057e-09,
    1.6160853275510512e-09,
    1.5083650345524237e-09,
    1.4305498138471676e-09,
    1.3695434471115935e-09,
    1.3193139264951539e-09,
    1.2765849538906623e-09,
    1.2393785886825989e-09,
    1.2064090187897673e-09,
    1.1767932423346918e-09,
    1.1498986477733707e-09,
    1.1252564706432428e-09,
    1.1025096747562618e-09,
    1.0813800351275329e-09,
    1.0616465149697269e-09,
    1.0431305846498399e-09,
    1.0256859691519228e-09,
    1.0091913119697182e-09,
    9.9354481331011417e-10,
    9.7866023744810009e-10,
    9.6446388998628861e-10,
    9.5089229531779369e-10,
    9.3789038822239655e-10,
    9.2541008877423331e-10,
    9.1340916700090508e-10,
    9.0185032933938995e-10,
    8.9070047683136928e-10,
    8.7993009770560727e-10,
    8.6951276614325991e-10,
    8.5942472569584353e-10,
    8.4964454075341434e-10,
    8.4015280313997285e-10,
    8.3093188368909457e-10,
    8.2196572076746806e-10,
    8.1323963933951678e-10,
    8.047401954263356e-10,
    7.9645504179669542e-10,
    7.8837281150284712e-10,
    7.8048301648816778e-10,
    7.7277595898386744e-10,
    7.6524265380554569e-10,
    7.5787475997825383e-10,
    7.5066452037688907e-10,
    7.4360470827953897e-10,
    7.3668857990437487e-10,
    7.2990983214332731e-10,
    7.2326256482392188e-10,
    7.1674124692894756e-10,
    7.1034068628574142e-10,
    7.0405600230574529e-10,
    6.978826014129749e-10,
    6.9181615484903791e-10,
    6.8585257858388259e-10,
    6.7998801509680711e-10,
    6.7421881682242775e-10,
    6.6854153108213478e-10,
    6.6295288634374477e-10,
    6.5744977967115941e-10,
    6.5202926524233487e-10,
    6.466885438281476e-10,
    6.41424953137139e-10,
    6.362359589419095e-10,
    6.3111914691234211e-10,
    6.2607221508906309e-10,
    6.210929669377549e-10,
    6.1617930493126837e-10,
    6.1132922461204894e-10,
    6.0654080909230643e-10,
    6.0181222395369335e-10,
    5.9714171251210041e-10,
    5.9252759141658199e-10,
    5.8796824655445014e-10,
    5.8346212923726859e-10,
    5.7900775264487822e-10,
    5.746036885067273e-10,
    5.7024856400169659e-10,
    5.6594105885932681e-10,
    5.6167990264689332e-10,
    5.5746387222815721e-10,
    5.5329178938086624e-10,
    5.4916251856119775e-10,
    5.4507496480435002e-10,
    5.4102807175139812e-10,
    5.3702081979335747e-10,
    5.3305222432414755e-10,
    5.2912133409482306e-10,
    5.2522722966205776e-10,
    5.2136902192442423e-10,
    5.175458507405214e-10,
    5.1375688362346586e-10,
    5.1000131450668444e-10,
    5.0627836257633164e-10,
    5.025872711660075e-10,
    4.989273067097743e-10,
    4.9529775774976432e-10,
    4.9169793399494192e-10,
    4.8812716542783077e-10,
    4.8458480145624493e-10,
    4.8107021010727052e-10,
    4.7758277726093884e-10,
    4.7412190592120625e-10,
    4.7068701552202137e-10,
    4.6727754126640935e-10,
    4.6389293349664115e-10,
    4.6053265709368522e-10,
    4.571961909042551e-10,
    4.5388302719387807e-10,
    4.5059267112450939e-10,
    4.4732464025531152e-10,
    4.4407846406530299e-10,
    4.4085368349666433e-10,
    4.3764985051756054e-10,
    4.3446652770341094e-10,
    4.3130328783559975e-10,
    4.2815971351668238e-10,
    4.2503539680119599e-10,
    4.2192993884123644e-10,
    4.1884294954600997e-10,
    4.1577404725461407e-10,
    4.1272285842134283e-10,
    4.0968901731285145e-10,
    4.0667216571654994e-10,
    4.0367195265963012e-10,
    4.0068803413816153e-10,
    3.9772007285572071e-10,
    3.9476773797104552e-10,
    3.9183070485423177e-10,
    3.8890865485101289e-10,
    3.8600127505468502e-10,
    3.8310825808526102e-10,
    3.8022930187545515e-10,
    3.7736410946311846e-10,
    3.745123887897605e-10,
    3.7167385250480925e-10,
    3.6884821777527428e-10,
    3.6603520610049127e-10,
    3.6323454313163834e-10,
    3.604459584957253e-10,
    3.5766918562376688e-10,
    3.549039615828605e-10,
    3.5215002691189691e-10,
    3.4940712546063977e-10,
    3.4667500423191722e-10,
    3.4395341322667288e-10,
    3.4124210529163139e-10,
    3.385408359693348e-10,
    3.3584936335031234e-10,
    3.3316744792714707e-10,
    3.3049485245020669e-10,
    3.2783134178480499e-10,
    3.2517668276956355e-10,
    3.2253064407574064e-10,
    3.198929960672955e-10,
    3.1726351066145278e-10,
    3.1464196118953065e-10,
    3.1202812225779171e-10,
    3.0942176960807224e-10,
    3.0682267997793974e-10,
    3.0423063096012328e-10,
    3.0164540086095256e-10,
    2.9906676855753481e-10,
    2.9649451335338913e-10,
    2.9392841483224551e-10,
    2.9136825270970654e-10,
    2.8881380668245419e-10,
    2.862648562746704e-10,
    2.837211806813234e-10,
    2.8118255860795319e-10,
    2.7864876810656953e-10,
    2.7611958640725424e-10,
    2.7359478974503287e-10,
    2.7107415318155652e-10,
    2.6855745042110221e-10,
    2.6604445362036897e-10,
    2.6353493319150973e-10,
    2.6102865759779957e-10,
    2.5852539314129667e-10,
    2.5602490374180446e-10,
    2.5352695070638971e-10,
    2.5103129248865256e-10,
    2.4853768443688023e-10,
    2.460458785301429e-10,
    2.4355562310131385e-10,
    2.4106666254590485e-10,
    2.3857873701551424e-10,
    2.3609158209457477e-10,
    2.3360492845897052e-10,
    2.3111850151495944e-10,
    2.28632021016689e-10,
    2.2614520066043008e-10,
    2.236577476534685e-10,
    2.2116936225539013e-10,
    2.1867973728926476e-10,
    2.161885576199768e-10,
    2.136954995966623e-10,
    2.112002304558856e-10,
    2.0870240768182359e-10,
    2.0620167831931102e-10,
    2.0369767823513288e-10,
    2.0119003132241919e-10,
    1.9867834864239555e-10,
    1.961622274970566e-10,
    1.9364125042554798e-10,
    1.9111498411614759e-10,
    1.8858297822471241e-10,
    1.8604476408927905e-10,
    1.8349985332914956e-10,
    1.8094773631522694e-10,
    1.7838788049654947e-10,
    1.7581972856586422e-10,
    1.732426964446226e-10,
    1.706561710649093e-10,
    1.6805950792244583e-10,
    1.6545202837084804e-10,
    1.6283301662263307e-10,
    1.6020171641692272e-10,
    1.5755732730718426e-10,
    1.5489900051445686e-10,
    1.5222583428203745e-10,
    1.4953686865617938e-10,
    1.4683107960352021e-10,
    1.4410737235911138e-10,
    1.4136457387830636e-10,
    1.386014242403918e-10,
    1.3581656682043596e-10,
    1.3300853700670178e-10,
    1.3017574919190774e-10,
    1.2731648170466352e-10,
    1.2442885926858686e-10,
    1.2151083247553012e-10,
    1.1856015362861938e-10,
    1.1557434814019888e-10,
    1.1255068044491655e-10,
    1.094861130887108e-10,
    1.0637725725104608e-10,
    1.0322031240760212e-10,
    1.0001099208030212e-10,
    9.6744431555354561e-11,
    9.3415071930801402e-11,
    9.0016512652188867e-11,
    8.6541321438252734e-11,
    8.2980785579047097e-11,
    7.9324580976937706e-11,
    7.5560323199469468e-11,
    7.1672944974837421e-11,
    6.7643810876466477e-11,
    6.3449420379117838e-11,
    5.9059440015329622e-11,
    5.4433588650933759e-11,
    4.9516444707049343e-11,
    4.422820397243711e-11,
    3.8446770646653701e-11,
    3.1968807089146292e-11,
    2.4409617196261701e-11,
    1.4866740399740545e-11,
]

_PUBLISHED = {
    "normal": (NORMAL_R, NORMAL_V, NORMAL_BITS, NORMAL_X, NORMAL_Y, NORMAL_K, NORMAL_W),
    "exponential": (
        EXPONENTIAL_R,
        EXPONENTIAL_V,
        EXPONENTIAL_BITS,
        EXPONENTIAL_X,
        EXPONENTIAL_Y,
        EXPONENTIAL_K,
        EXPONENTIAL_W,
    ),
}


def published_table(name: str) -> dict:
    """Return a published table as a dictionary of numpy arrays.

    Parameters
    ----------
    name : str
        ``"normal"`` or ``"exponential"``.

    Returns
    -------
    dict
        Keys ``r``, ``v``, ``bits``, ``x``, ``y``, ``k`` (uint64) and ``w``.

    Raises
    ------
    KeyError
        If no table is published under ``name``.
    """
    if name not in _PUBLISHED:
        raise KeyError(
            f"No published table for '{name}'. Available: {sorted(_PUBLISHED)}"
        )
    r, v, bits, x, y, k, w = _PUBLISHED[name]
    return {
        "r": r,
        "v": v,
        "bits": bits,
        "x": np.array(x, dtype=np.float64),
        "y": np.array(y, dtype=np.float64),
        "k": np.array(k, dtype=np.uint64),
        "w": np.array(w, dtype=np.float64),
    }
