"""Turkish interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def turkish_set() -> TranslationSet:
    """Return the Turkish translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="temizleniyor",
        removing_status="kaldırılıyor",
        restarting_status="yeniden başlatılıyor",
        stopping_status="durduruluyor",
        running_custom_command_status="özel komut çalıştır",
        no_view_maching_new_line_focused_switch_statement=(
            "NewLineFocused anahtar deyimi ile eşleşen görünüm yok"
        ),
        error_occurred=(
            "Bir hata oluştu! Lütfen https://github.com/jesseduffield/lazydocker/issues "
            "adresinden bir hataya ilişkin konu oluşturun"
        ),
        connection_failed=(
            "Docker bağlantısı başarısız oldu. Docker' ı yeniden başlatmanız gerekebilir"
        ),
        unattachable_container_error=(
            "Konteyner attaching modunda çalışmayı desteklemiyor. Hizmeti '-it' "
            "opsiyonu ile çalıştırmanız veya docker-compose.yml dosyasında "
            "`stdin_open: true, tty: true` kullanmanız gerekir."
        ),
        cannot_attach_stopped_container_error=(
            "Durdurulan konteynera bağlanamazsınız, ilk önce başlatmanız gerekir "
            "(aslında başlatmayı r tuşu ile yapabilirsiniz) (evet, senin için bunu "
            "otomatik olarak yapabilirim fakat çok tembelim) (hata mesajı ile seninle "
            "birebir iletişim kurmam çok daha güzel)"
        ),
        cannot_access_docker_socket_error=(
            "Docker' a şu adresten erişilemiyor : unix:///var/run/docker.sock\n"
            " lazydocker' ı root(kök kullanıcı) olarak çalıştır veya şu adresteki "
            "adımları takip et : https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        donate="Bağış",
        confirm="Onayla",
        return_="dönüş",
        focus_main="ana panele odaklan",
        navigate="gezin",
        execute="çalıştır",
        close="kapat",
        menu="menü",
        menu_title="Menü",
        scroll="kaydır",
        open_config="lazydocker ayarlarını aç",
        edit_config="lazzydocker ayarlarını düzenle",
        cancel="iptal",
        remove="kaldır",
        force_remove="kaldırmaya zorla",
        remove_with_volumes="alanları ile birlikte kaldır",
        remove_service="konteynerleri kaldır",
        stop="durdur",
        restart="yeniden başlat",
        rebuild="yeniden yapılandır",
        recreate="yeniden oluştur",
        previous_context="önceki sekme",
        next_context="sonraki sekme",
        attach="bağlan/iliştir",
        view_logs="kayıt defterini görüntüle",
        remove_image="imajı kaldır",
        remove_volume="alanı kaldır",
        remove_network="ağı kaldır",
        remove_without_prune="etkisiz ebeveynleri silmeden kaldır",
        prune_containers="çalışmayan konteynerleri temizle",
        prune_volumes="kullanılmayan alanları temizle",
        prune_networks="kullanılmayan ağları temizle",
        prune_images="kullanılmayan imajları temizle",
        view_restart_options="yeniden başlatma seçeneklerini görüntüle",
        run_custom_command="önceden tanımlanmış özel komutu çalıştır",
        global_title="Global",
        main_title="Ana",
        project_title="Proje",
        services_title="Servisler",
        containers_title="Konteynerler",
        standalone_containers_title="Bağımsız Konteynerler",
        images_title="Imajlar",
        volumes_title="Alanlar",
        networks_title="Ağları",
        custom_command_title="Özel Komut:",
        error_title="Hata",
        logs_title="Kayitlar",
        config_title="Ayarlar",
        env_title="Env",
        docker_compose_config_title="Docker-Compose Ayar",
        top_title="Top",
        stats_title="Durumlar",
        credits_title="Hakkinda",
        container_config_title="Konteyner Ayar",
        container_env_title="Konteyner Env",
        nothing_to_display="Nothing to display",
        cannot_display_env_variables=(
            "Something went wrong while displaying environment variables"
        ),
        no_containers="Konteynerler yok",
        no_container="Konteyner yok",
        no_images="Imajlar yok",
        no_volumes="Alanlar yok",
        no_networks="Ağları yok",
        confirm_quit="Çıkmak istediğine emin misin?",
        must_force_to_remove_container=(
            "Zorlamadan çalışan bir konteyneri kaldıramazsınız. Zorlamak ister misin?"
        ),
        not_enough_space="Panelleri oluşturmak için yeterli alan yok",
        confirm_prune_images=(
            "Kullanılmayan tüm görüntüleri temizlemek istediğinize emin misiniz?"
        ),
        confirm_prune_containers=(
            "Durdurulan tüm konteynerları temizlemek istediğinizden emin misiniz?"
        ),
        confirm_prune_volumes=(
            "Kullanılmayan tüm alanları temizlemek istediğinizden emin misiniz?"
        ),
        confirm_prune_networks=(
            "Kullanılmayan tüm ağları temizlemek istediğinizden emin misiniz?"
        ),
        stop_service="Bu servisin konteynerlerini durdurmak istediğinize emin misiniz?",
        stop_container="Bu konteyneri durdurmak istediğinize emin misiniz?",
        press_enter_to_return=(
            "lazydocker' a geri dönmek için enter tuşuna basın ( Bu uyarı, "
            "`gui.return Immediately: true` ayarıyla devre dışı bırakılabilir)"
        ),
        detach_from_container_short_cut=(
            "Varsayılan olarak, kaptan ayırmak için ctrl-p ve ardından ctrl-q "
            "tuşlarına basın"
        ),
    )