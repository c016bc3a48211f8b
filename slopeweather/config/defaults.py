"""Default resort catalog with coordinates and resort links."""

from slopeweather.config.schema import OperatingHours, ResortConfig

DEFAULT_RESORTS: list[ResortConfig] = [
    ResortConfig(
        name="High1 Resort",
        slug="high1",
        latitude=37.2067,
        longitude=128.8390,
        homepage_url="https://www.high1.com",
        slope_status_url="https://www.high1.com/ski/slopeView.do?key=748&mode=p",
        operating_hours=OperatingHours(day="09:00 - 16:00", night="18:00 - 22:00"),
    ),
    ResortConfig(
        name="Mona Yongpyong",
        slug="yongpyong",
        latitude=37.6450,
        longitude=128.6810,
        homepage_url="https://www.yongpyong.co.kr",
        slope_status_url="https://www.yongpyong.co.kr/kor/skiNboard/slope/openStatusBoard.do",
        webcam_url="https://www.yongpyong.co.kr/kor/guide/realTimeNews/ypResortWebcam.do",
        operating_hours=OperatingHours(day="09:00 - 17:00", night="18:30 - 22:00"),
    ),
    ResortConfig(
        name="Vivaldi Park",
        slug="vivaldi",
        latitude=37.6480,
        longitude=127.6840,
        homepage_url="https://www.sonohotelsresorts.com/vp",
        slope_status_url="https://www.sonohotelsresorts.com/skiboard/status",
        operating_hours=OperatingHours(
            day="08:30 - 16:30",
            night="18:30 - 22:30",
            late_night="22:00 - 03:00 (next day)",
        ),
    ),
    ResortConfig(
        name="Phoenix Pyeongchang",
        slug="phoenix",
        latitude=37.5834,
        longitude=128.3254,
        homepage_url="https://phoenixhnr.co.kr/pyeongchang/index",
        slope_status_url="https://phoenixhnr.co.kr/static/pyeongchang/snowpark/slope-lift",
        webcam_url="https://phoenixhnr.co.kr/page/pyeongchang/guide/operation/sketchMovie",
        operating_hours=OperatingHours(
            day="09:00 - 16:00", night="18:00 - 22:00", late_night="22:00 - 24:00"
        ),
    ),
    ResortConfig(
        name="Welli Hilli Park",
        slug="wellihilli",
        latitude=37.4906,
        longitude=128.2506,
        homepage_url="https://www.wellihillipark.com",
        slope_status_url="https://m.wellihillipark.com/snowpark/schedule/open-slope",
        webcam_url="https://m.wellihillipark.com/customer/webcam",
        operating_hours=OperatingHours(
            day="09:00 - 16:30", night="18:30 - 22:30", late_night="22:30 - 24:00"
        ),
    ),
    ResortConfig(
        name="Alpensia",
        slug="alpensia",
        latitude=37.6628,
        longitude=128.6814,
        homepage_url="https://www.alpensia.com",
        slope_status_url="https://www.alpensia.com/ski/slope-now.do",
        webcam_url="https://www.alpensia.com/guide/web-cam.do",
        operating_hours=OperatingHours(day="09:00 - 17:00", night="18:30 - 21:30"),
    ),
    ResortConfig(
        name="Elysian Gangchon",
        slug="elysian",
        latitude=37.8164,
        longitude=127.5870,
        homepage_url="https://www.elysian.co.kr",
        slope_status_url="https://www.elysian.co.kr/about-gangchon/sky#guide-to-using-slopes",
        operating_hours=OperatingHours(
            day="09:00 - 17:00",
            night="18:30 - 24:00 (Sun-Thu)",
            late_night="18:30 - 03:00 (Fri, Sat)",
        ),
    ),
    ResortConfig(
        name="O2 Resort",
        slug="o2",
        latitude=37.1775,
        longitude=128.9478,
        homepage_url="https://www.o2resort.com",
        slope_status_url="https://www.o2resort.com/SKI/slopeOpen.jsp",
        webcam_url="https://www.o2resort.com/SKI/liftInfo.jsp",
        operating_hours=OperatingHours(day="09:00 - 16:30", night="18:00 - 21:30"),
    ),
    ResortConfig(
        name="Konjiam Resort",
        slug="konjiam",
        latitude=37.3369,
        longitude=127.2936,
        homepage_url="https://www.konjiamresort.co.kr",
        slope_status_url="https://www.konjiamresort.co.kr/ski/slopeOpenClose.dev",
        webcam_url="https://www.konjiamresort.co.kr/ski/liveCam.dev",
        operating_hours=OperatingHours(
            day="09:00 - 17:00", night="19:00 - 22:00", late_night="22:00 - 02:00"
        ),
    ),
    ResortConfig(
        name="Jisan Forest",
        slug="jisan",
        latitude=37.2167,
        longitude=127.3453,
        homepage_url="https://www.jisanresort.co.kr",
        slope_status_url="https://www.jisanresort.co.kr/m/ski/slopes/info.asp",
        webcam_url="https://www.jisanresort.co.kr/m/ski/slopes/webcam.asp",
        operating_hours=OperatingHours(
            day="09:00 - 17:00", night="18:30 - 23:00", late_night="23:00 - 02:00"
        ),
    ),
    ResortConfig(
        name="Muju Deogyusan",
        slug="muju",
        latitude=35.8908,
        longitude=127.7369,
        homepage_url="https://www.mdysresort.com",
        slope_status_url="https://www.mdysresort.com/convert_main_slope_221207.asp",
        webcam_url="https://www.mdysresort.com/guide/webcam.asp",
        operating_hours=OperatingHours(
            day="09:30 - 16:00", night="18:30 - 22:00", late_night="22:00 - 24:00"
        ),
    ),
    ResortConfig(
        name="Eden Valley",
        slug="edenvalley",
        latitude=35.4289,
        longitude=128.9844,
        homepage_url="http://www.edenvalley.co.kr",
        slope_status_url="https://www.edenvalley.co.kr/Ski/View.asp?location=01-1",
        webcam_url="https://www.edenvalley.co.kr/CS/cam_pop1.asp",
        operating_hours=OperatingHours(day="10:00 - 17:00", night="19:00 - 23:00"),
    ),
]
