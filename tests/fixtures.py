"""Sample NextBus feed responses used across the tests."""

ROUTE_LIST_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<body copyright="All data copyright AC Transit 2024.">
<route tag="18" title="18" shortTitle="18"/>
<route tag="51A" title="51A - Fruitvale BART" shortTitle="51A"/>
<route tag="NL" title="NL - Transbay"/>
</body>
"""

ROUTE_CONFIG_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<body copyright="All data copyright AC Transit 2024.">
<route tag="18" title="18" color="006633" oppositeColor="ffffff">
<stop tag="0306650" title="E. 59th/Telegraph" shortTitle="59th" lat="37.84" lon="-122.26" stopId="55558"/>
<stop tag="0306660" title="Telegraph &amp; 51st" shortTitle="51st" lat="37.83" lon="-122.26" stopId="55559"/>
<stop tag="0306670" title="Shattuck &amp; Ashby" lat="37.85" lon="-122.26" stopId="55560"/>
<direction tag="18_23_0" title="To Albany" name="North" useForUI="true">
<stop tag="0306650"/>
<stop tag="0306660"/>
</direction>
<path><point lat="37.84" lon="-122.26"/></path>
</route>
</body>
"""

PREDICTIONS_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<body copyright="All data copyright AC Transit 2024.">
<predictions agencyTitle="AC Transit" routeTitle="18" routeTag="18" stopTitle="E. 59th/Telegraph" stopTag="0306650">
<direction title="To Albany">
<prediction epochTime="1700000000000" seconds="240" minutes="4" isDeparture="false" dirTag="18_23_0" vehicle="1234" block="18001" tripTag="1"/>
<prediction epochTime="1700000900000" seconds="1140" minutes="19" isDeparture="false" dirTag="18_23_0" vehicle="1240" block="18002" tripTag="2"/>
</direction>
<direction title="To Downtown Oakland">
<prediction epochTime="1700000300000" seconds="300" minutes="5" isDeparture="false" dirTag="18_24_1" vehicle="1250" block="18003" tripTag="3"/>
</direction>
<message text="No service on holidays" priority="Normal"/>
<message text="Detour on Telegraph" priority="High"/>
</predictions>
</body>
"""

EMPTY_PREDICTIONS_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<body copyright="All data copyright AC Transit 2024.">
<predictions agencyTitle="AC Transit" routeTitle="18" routeTag="18" stopTitle="E. 59th/Telegraph" dirTitleBecauseNoPredictions="To Albany">
</predictions>
</body>
"""

ERROR_XML = b"""<?xml version="1.0" encoding="utf-8" ?>
<body copyright="All data copyright NextBus 2024.">
<Error shouldRetry="false">Agency parameter "a=nope" is not valid.</Error>
</body>
"""
