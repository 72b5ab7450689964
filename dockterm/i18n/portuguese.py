"""Portuguese interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def portuguese_set() -> TranslationSet:
    """Return the Portuguese translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="destruindo",
        removing_status="removendo",
        restarting_status="reiniciando",
        starting_status="iniciando",
        stopping_status="parando",
        upping_service_status="subindo serviço",
        upping_project_status="subindo projeto",
        downing_status="derrubando",
        pausing_status="pausando",
        running_custom_command_status="executando comando personalizado",
        running_bulk_command_status="executando comando em massa",
        no_view_maching_new_line_focused_switch_statement=(
            "No view matching newLineFocused switch statement"
        ),
        error_occurred=(
            "Um erro ocorreu! Por favor, crie uma issue em "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "Falha na conexão com o cliente Docker. "
            "Você pode precisar reiniciar o seu cliente Docker"
        ),
        unattachable_container_error=(
            "O contêiner não suporta anexação. Você deve executar o serviço com a "
            "flag '-it' ou usar `stdin_open: true, tty: true` no arquivo "
            "docker-compose.yml"
        ),
        waiting_for_container_info=(
            "Não é possível prosseguir até que o Docker forneça mais informações "
            "sobre o contêiner. Por favor, tente novamente em alguns momentos."
        ),
        cannot_attach_stopped_container_error=(
            "Você não pode anexar a um contêiner parado, você precisa iniciá-lo "
            "primeiro (o que você pode fazer com a tecla 'r') (sim, sou preguiçoso "
            "demais para fazer isso automaticamente para você) (aliás, bem legal que "
            "eu posso me comunicar diretamente com você na forma de uma mensagem de "
            "erro)"
        ),
        cannot_access_docker_socket_error=(
            "Não é possível acessar o sôquete docker em: unix:///var/run/docker.sock\n"
            "Execute o lazydocker como root ou leia "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        cannot_kill_child_error=(
            "Três segundos foram esperarados para que os processos filhos parassem. "
            "Pode haver um processo órfão que continua em execução em seu sistema."
        ),
        donate="Doar",
        confirm="Confirmar",
        return_="retornar",
        focus_main="focar no painel principal",
        lc_filter="filtrar lista",
        navigate="navegar",
        execute="executar",
        close="fechar",
        quit="sair",
        menu="menu",
        menu_title="Menu",
        scroll="rolar",
        open_config="abrir configuração do lazydocker",
        edit_config="editar configuração do lazydocker",
        cancel="cancelar",
        remove="remover",
        hide_stopped="ocultar/mostrar contêineres parados",
        force_remove="forçar remoção",
        remove_with_volumes="remover com volumes",
        remove_service="remover contêineres",
        up_service="subir serviço",
        stop="parar",
        pause="pausar",
        restart="reiniciar",
        down="derrubar projeto",
        down_with_volumes="derrubar projetos com volumes",
        start="iniciar",
        rebuild="reconstuir",
        recreate="recriar",
        previous_context="aba anterior",
        next_context="próxima aba",
        attach="anexar",
        view_logs="ver logs",
        up_project="subir projeto",
        down_project="derrubar projeto",
        remove_image="remover imagem",
        remove_volume="remover volume",
        remove_network="remover rede",
        remove_without_prune="remover sem deletar pais não etiquetados",
        remove_without_prune_with_force=(
            "remover (forçado) sem deletar pais não etiquetados"
        ),
        remove_with_force="remover (forçado)",
        prune_containers="destruir contêineres encerrados",
        prune_volumes="destruir volumes não utilizados",
        prune_networks="destruir redes não utilizadas",
        prune_images="destruir imagens não utilizadas",
        stop_all_containers="parar todos os contêineres",
        remove_all_containers="remover todos os contêineres (forçado)",
        view_restart_options="ver opções de reinício",
        exec_shell="executar shell",
        run_custom_command="executar comando personalizado predefinido",
        view_bulk_commands="ver comandos em massa",
        filter_list="filtrar lista",
        open_in_browser="abrir no navegador (primeira porta é http)",
        sort_containers_by_state="ordenar contêineres por estado",
        global_title="Global",
        main_title="Principal",
        project_title="Projeto",
        services_title="Serviços",
        containers_title="Contêineres",
        standalone_containers_title="Contêineres Avulsos",
        images_title="Imagens",
        volumes_title="Volumes",
        networks_title="Redes",
        custom_command_title="Comando Personalizado:",
        bulk_command_title="Comando em Massa:",
        error_title="Erro",
        logs_title="Registros",
        config_title="Config",
        env_title="Env",
        docker_compose_config_title="Docker-Compose Config",
        top_title="Topo",
        stats_title="Estatísticas",
        credits_title="Sobre",
        container_config_title="Configuração do Contêiner",
        container_env_title="Contêiner Env",
        nothing_to_display="Nada a exibir",
        no_container_for_service=(
            "Nenhum log para exibir; o serviço não está associado a nenhum contêiner"
        ),
        cannot_display_env_variables=(
            "Algo deu errado ao exibir as variáveis de ambiente"
        ),
        no_containers="Sem contêineres",
        no_container="Sem contêiner",
        no_images="Sem imagens",
        no_volumes="Sem volumes",
        no_networks="Sem redes",
        no_services="Sem serviços",
        confirm_quit="Tem certeza que deseja sair?",
        confirm_up_project=(
            "Tem certeza que deseja 'iniciar' seu projeto docker compose?"
        ),
        must_force_to_remove_container=(
            "Você não pode remover um contêiner em execução a menos que o force. "
            "Deseja forçar?"
        ),
        not_enough_space="Sem espaço suficiente para renderizar os painéis",
        confirm_prune_images=(
            "Tem certeza que deseja eliminar todas as imagens não utilizadas?"
        ),
        confirm_prune_containers=(
            "Tem certeza que deseja destruir todos os contêineres parados?"
        ),
        confirm_stop_containers="Tem certeza que deseja parar todos os contêineres?",
        confirm_remove_containers=(
            "Tem certeza que deseja remover todos os contêineres?"
        ),
        confirm_prune_volumes=(
            "Tem certeza que deseja destruir todos os volumes não utilizados?"
        ),
        confirm_prune_networks=(
            "Tem certeza que deseja destruir todas as redes não utilizadas?"
        ),
        stop_service="Tem certeza que deseja parar os contêineres deste serviço?",
        stop_container="Tem certeza que deseja parar este contêiner?",
        press_enter_to_return=(
            "Pressione enter para retornar ao lazydocker (este prompt pode ser "
            "desativado em sua configuração definindo `gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "Por padrão, para desanexar do contêiner, pressione ctrl-p e depois ctrl-q"
        ),
        no="não",
        yes="sim",
        lc_next_screen_mode="modo de tela seguinte (normal/meia/tela cheia)",
        lc_prev_screen_mode="modo de tela anterior",
        filter_prompt="filtro",
    )